"""Tests for the extraction session (the screen's state without Qt)."""

import pytest

from openpasteview.errors import EmptyTextError, IndexOutOfRange
from openpasteview.logic.session import COPY_HINT, EMPTY_TEXT_MESSAGE, ExtractSession
from openpasteview.models.line_record import CopyField


class TestAnalyze:
    def test_empty_text_raises(self):
        session = ExtractSession()
        with pytest.raises(EmptyTextError, match=EMPTY_TEXT_MESSAGE):
            session.analyze()
        assert session.records == []

    def test_builds_records(self):
        session = ExtractSession("007 abc 3w\n1002 xyz 2k")
        records = session.analyze()
        assert [(r.id, r.amount) for r in records] == [("007", 30000), ("1002", 2000)]
        assert session.records == records

    def test_reanalyze_rebuilds_from_scratch(self, clipboard):
        session = ExtractSession("1001 a 5w")
        session.analyze()
        session.copy(0, CopyField.ID, clipboard)

        session.text = "1001 a 5w\n1002 b 1"
        records = session.analyze()
        assert len(records) == 2
        assert records[0].id_copied is False

    def test_unmatched_text_gives_no_records(self):
        session = ExtractSession("hello")
        assert session.analyze() == []
        assert session.hint == ""


class TestResetAndCopy:
    def test_reset(self):
        session = ExtractSession("1001 a 5w")
        session.analyze()
        session.reset()
        assert session.text == ""
        assert session.records == []
        assert session.hint == ""

    def test_hint_after_analyze(self):
        session = ExtractSession("1001 a 5w")
        session.analyze()
        assert session.hint == COPY_HINT

    def test_copy_updates_records(self, clipboard):
        session = ExtractSession("1001 a 5w\n1002 b 2k")
        session.analyze()

        rec = session.copy(1, "amount", clipboard)

        assert clipboard.text == "2000"
        assert rec.amount_copied is True
        assert session.records[1] is rec
        assert session.records[0].amount_copied is False

    def test_copy_bad_index_keeps_records(self, clipboard):
        session = ExtractSession("1001 a 5w")
        before = session.analyze()
        with pytest.raises(IndexOutOfRange):
            session.copy(1, CopyField.ID, clipboard)
        assert session.records == before
