"""Dictionary query construction with morphological suffix variants."""

from ..models import TIBETAN, WYLIE, ScriptType

# Field holding the canonical form for each script
SCRIPT_FIELDS = {TIBETAN: "name_tibt", WYLIE: "name_latin"}

# Wylie headwords are stored with a trailing slash
WYLIE_TERMINATOR = "/"

# Adverbializer / la-don endings: try the candidate as is and without its final letter
ADVERBIALIZER_SUFFIXES = {
    TIBETAN: ("\u0F54\u0F62", "\u0F56\u0F62"),  # par, bar
    WYLIE: ("par", "bar"),
}

# Genitive and final particle endings: drop one or two trailing characters
GENITIVE_FINAL_SUFFIXES = {
    TIBETAN: ("\u0F60\u0F72", "\u0F60\u0F7C"),  # 'i, 'o
    WYLIE: ("'i", "'o"),
}


def query_variants(candidate: str, script: ScriptType) -> list[str]:
    """List the literal forms a candidate may be stored under.

    Character counts are literal: the trailing one or two code points are
    dropped whatever syllable cluster they belong to.

    Args:
        candidate: Text to look up
        script: ``"tibetan"`` or ``"wylie"``

    Returns:
        Literals in query order; Wylie literals carry the trailing slash
    """
    if candidate.endswith(ADVERBIALIZER_SUFFIXES[script]):
        variants = [candidate, candidate[:-1]]
    elif candidate.endswith(GENITIVE_FINAL_SUFFIXES[script]):
        variants = [candidate[:-1], candidate[:-2]]
    else:
        variants = [candidate]

    if script == WYLIE:
        variants = [variant + WYLIE_TERMINATOR for variant in variants]
    return variants


def _quote(literal: str) -> str:
    escaped = literal.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def build_query(candidate: str, script: ScriptType) -> str:
    """Build the Lucene field query for a candidate.

    Examples:
        ``chos`` -> ``name_latin:"chos/"``
        ``chos par`` -> ``name_latin:("chos par/" OR "chos pa/")``
    """
    field = SCRIPT_FIELDS[script]
    terms = [_quote(variant) for variant in query_variants(candidate, script)]
    if len(terms) == 1:
        return f"{field}:{terms[0]}"
    return f"{field}:({' OR '.join(terms)})"
