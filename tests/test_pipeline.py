"""Tests for the parse pipeline."""

import json

import pandas as pd
import pytest

from tibparser.config import Config, DictionaryConfig
from tibparser.dictionary import WordlistDictionary
from tibparser.exceptions import EmptyPhraseError
from tibparser.pipeline import ParsePipeline, is_debug_flag, read_phrases


class TestParse:
    """Tests for parsing a single phrase."""

    def test_wylie_phrase(self, dictionary):
        result = ParsePipeline(dictionary).parse("chos sku")

        assert result.to_dict() == {
            "original_phrase": "chos sku",
            "script_type": "wylie",
            "parsed": [
                {"id": "1", "tibetan": "ཆོས", "wylie": "chos", "matched": True},
                {"id": "2", "tibetan": "སྐུ", "wylie": "sku", "matched": True},
            ],
        }
        assert result.debug is None

    def test_tibetan_phrase_with_shads(self, dictionary):
        result = ParsePipeline(dictionary).parse("། ཆོས་སྐུ། ངོ་བོ་ཉིད།")

        assert result.script_type == "tibetan"
        assert result.original_phrase == "ཆོས་སྐུ། ངོ་བོ་ཉིད།"
        assert [m.id for m in result.parsed] == ["1", "2", "4", "5"]

    def test_unmatched_phrase(self, empty_dictionary):
        result = ParsePipeline(empty_dictionary).parse("xyz")
        assert result.to_dict()["parsed"] == [
            {"id": None, "tibetan": "xyz", "wylie": "xyz", "matched": False}
        ]

    @pytest.mark.parametrize("text", ["", "   ", None])
    def test_empty_phrase(self, dictionary, text):
        with pytest.raises(EmptyPhraseError) as exc_info:
            ParsePipeline(dictionary).parse(text)

        assert exc_info.value.to_dict() == {
            "code": "empty_phrase",
            "message": "Phrase is empty",
            "data": {"status": 400},
        }
        assert dictionary.calls == []

    def test_noise_only_phrase(self, dictionary):
        result = ParsePipeline(dictionary).parse("།། ༡༢")
        assert result.original_phrase == ""
        assert result.script_type == "tibetan"
        assert result.parsed == []

    def test_repeat_across_subphrases_is_looked_up_once(self, dictionary):
        result = ParsePipeline(dictionary).parse("ཆོས། ཆོས་སྐུ། ཆོས")

        assert [m.id for m in result.parsed] == ["1", "2"]
        assert [c for c, _ in dictionary.calls].count("ཆོས") == 1

    def test_residue_is_remembered_across_subphrases(self, empty_dictionary):
        result = ParsePipeline(empty_dictionary).parse("xyz, xyz")
        assert len(result.parsed) == 1
        assert empty_dictionary.calls == [("xyz", "wylie")]

    def test_deterministic(self, docs):
        first = ParsePipeline(WordlistDictionary(docs)).parse("chos xyz sku; ngo bo nyid")
        second = ParsePipeline(WordlistDictionary(docs)).parse("chos xyz sku; ngo bo nyid")
        assert first.to_dict() == second.to_dict()

    def test_debug_trace(self, dictionary):
        result = ParsePipeline(dictionary).parse("chos sku/ nyid", debug=True, dicts="kmassets ")

        payload = result.to_dict(include_debug=True)
        assert payload["debug"][0] == "chos sku/ nyid"
        assert "dicts: kmassets" in payload["debug"]
        assert "Doing: chos sku" in payload["debug"]
        assert "Doing: nyid" in payload["debug"]
        assert "subphrase: chos sku" in payload["debug"]

    def test_from_config(self, wordlist_csv):
        config = Config(dictionary=DictionaryConfig(backend="wordlist", wordlist_path=wordlist_csv))
        pipeline = ParsePipeline.from_config(config)
        assert pipeline.segmenter.max_iterations == 100
        assert [m.wylie for m in pipeline.parse("ngo bo nyid").parsed] == ["ngo bo", "nyid"]


class TestDebugFlag:
    """Tests for the debug parameter values."""

    @pytest.mark.parametrize("value", ["1", "true", "on", "yes", "debug", "TRUE", " yes ", True])
    def test_accepted(self, value):
        assert is_debug_flag(value)

    @pytest.mark.parametrize("value", [None, "", "0", "false", "off", "no", False, 1])
    def test_rejected(self, value):
        assert not is_debug_flag(value)


class TestBatch:
    """Tests for file processing."""

    def test_read_phrases(self, tmp_path):
        path = tmp_path / "phrases.txt"
        path.write_text(
            "chos sku\n\n"
            + json.dumps({"text": "ngo bo"}) + "\n"
            + json.dumps({"content": "nyid"}) + "\n"
            + json.dumps({"other": "x"}) + "\n"
            + "{not json\n",
            encoding="utf-8",
        )
        assert read_phrases(path) == [
            (1, "chos sku"),
            (3, "ngo bo"),
            (4, "nyid"),
            (6, "{not json"),
        ]

    def test_process_file(self, dictionary, tmp_path):
        input_path = tmp_path / "phrases.jsonl"
        input_path.write_text(
            "chos sku\n\n" + json.dumps({"text": "ngo bo nyid"}) + "\nxyz\n",
            encoding="utf-8",
        )
        output_path = tmp_path / "out" / "parsed.csv"

        count = ParsePipeline(dictionary).process_file(
            input_path, output_path, show_progress=False
        )

        assert count == 3
        df = pd.read_csv(output_path)
        assert list(df.columns) == [
            "Source_Line_Number",
            "Phrase",
            "Script_Type",
            "Match_Order",
            "Id",
            "Tibetan",
            "Wylie",
            "Matched",
        ]
        assert df["Source_Line_Number"].tolist() == [1, 1, 3, 3, 4]
        assert df["Match_Order"].tolist() == [1, 2, 1, 2, 1]
        assert df["Wylie"].tolist() == ["chos", "sku", "ngo bo", "nyid", "xyz"]
        assert df["Matched"].tolist() == [True, True, True, True, False]

    def test_process_empty_file(self, dictionary, tmp_path):
        input_path = tmp_path / "empty.txt"
        input_path.write_text("\n\n", encoding="utf-8")
        output_path = tmp_path / "parsed.csv"

        assert ParsePipeline(dictionary).process_file(input_path, output_path, False) == 0
        assert pd.read_csv(output_path).empty
