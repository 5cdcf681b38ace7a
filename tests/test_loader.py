import json

import pytest

from bigram_tfidf.preprocessing.loader import CorpusFileLoader


def _write_csv(path, text):
    path.write_text(text, encoding="utf-8")


class TestCorpusFileLoader:

    def test_maps_aliased_columns(self, tmp_path):
        _write_csv(tmp_path / "chicago.csv",
                   "status_id,city,screen_name,text,is_retweet\n"
                   "1,Chicago,DeepDishFan,best pizza in town,FALSE\n"
                   "2,Chicago,bob,RT @DeepDishFan: best pizza in town,TRUE\n")
        records = CorpusFileLoader(tmp_path).load_records()

        assert len(records) == 2
        first, second = records
        assert first.group == "Chicago"
        assert first.author == "DeepDishFan"
        assert first.post_id == "1"
        assert first.is_retweet is False
        assert second.is_retweet is True

    def test_missing_text_becomes_empty_record(self, tmp_path):
        _write_csv(tmp_path / "posts.csv", "group,author,text\nA,ann,\nA,bob,great pizza\n")
        records = CorpusFileLoader(tmp_path).load_records()
        assert [r.text for r in records] == ["", "great pizza"]

    def test_retweet_detected_when_column_absent(self, tmp_path):
        _write_csv(tmp_path / "posts.csv", "group,text\nA,RT @x: hello there\nA,hello there\n")
        records = CorpusFileLoader(tmp_path).load_records()
        assert [r.is_retweet for r in records] == [True, False]

    def test_tsv_and_jsonl_are_combined(self, tmp_path):
        _write_csv(tmp_path / "a.tsv", "group\ttext\nA\twood fired oven\n")
        with open(tmp_path / "b.jsonl", "w", encoding="utf-8") as f:
            f.write(json.dumps({"id": 7, "city": "B", "username": "cid", "text": "deep dish"}) + "\n")
            f.write(json.dumps({"id": 8, "city": "B", "username": None, "text": None}) + "\n")
        records = CorpusFileLoader(tmp_path).load_records()

        assert [(r.group, r.text) for r in records] == [("A", "wood fired oven"), ("B", "deep dish"), ("B", None)]
        assert records[1].author == "cid"
        assert records[1].post_id == "7"
        assert records[2].author == ""

    def test_rows_without_group_are_skipped(self, tmp_path):
        _write_csv(tmp_path / "a.csv", "group,text\nA,deep dish\n ,thin crust\n,stuffed crust\n")
        with open(tmp_path / "b.jsonl", "w", encoding="utf-8") as f:
            f.write(json.dumps({"group": "B", "text": "wood fired"}) + "\n")
            f.write(json.dumps({"group": None, "text": "wood fired"}) + "\n")
            f.write(json.dumps({"text": "coal oven"}) + "\n")
        records = CorpusFileLoader(tmp_path).load_records()

        assert [(r.group, r.text) for r in records] == [("A", "deep dish"), ("B", "wood fired")]

    def test_other_files_are_ignored(self, tmp_path):
        _write_csv(tmp_path / "notes.txt", "not a corpus")
        _write_csv(tmp_path / "posts.csv", "group,text\nA,hello there\n")
        assert len(CorpusFileLoader(tmp_path).load_records()) == 1

    def test_missing_directory(self, tmp_path):
        loader = CorpusFileLoader(tmp_path / "nope")
        assert loader.has_files() is False
        with pytest.raises(FileNotFoundError):
            loader.load_files()

    def test_no_matching_files(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            CorpusFileLoader(tmp_path).load_files()

    def test_required_columns(self, tmp_path):
        _write_csv(tmp_path / "posts.csv", "author,text\nann,hello there\n")
        with pytest.raises(ValueError):
            CorpusFileLoader(tmp_path).load_files()
