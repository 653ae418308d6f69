"""Dictionary backends."""

from ..config import DictionaryConfig
from ..exceptions import ConfigError
from .base import DictionaryClient, first_value, match_from_doc
from .query import build_query, query_variants
from .solr_client import SolrDictionaryClient
from .wordlist import WordlistDictionary


def create_dictionary_client(config: DictionaryConfig) -> DictionaryClient:
    """Create the backend selected in the configuration.

    Raises:
        ConfigError: If the wordlist backend has no usable file
    """
    if config.backend == "wordlist":
        if config.wordlist_path is None:
            raise ConfigError("dictionary.wordlist_path is required for the wordlist backend")
        return WordlistDictionary.from_csv(config.wordlist_path)
    return SolrDictionaryClient.from_config(config)


__all__ = [
    "DictionaryClient",
    "SolrDictionaryClient",
    "WordlistDictionary",
    "build_query",
    "query_variants",
    "first_value",
    "match_from_doc",
    "create_dictionary_client",
]
