from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor

import pytest

from filesort.categories import Category
from filesort.classifier import classify, classify_batch, extract_extension
from filesort.models import ClassificationRecord
from filesort.sample_data import demo_filenames


class TestExtractExtension:
    """Test extract_extension function."""

    @pytest.mark.parametrize("filename", ["readme_file", "Makefile", "", "no dots here"])
    def test_no_dot_yields_empty(self, filename: str) -> None:
        assert extract_extension(filename) == ""

    @pytest.mark.parametrize("filename", ["trailing.", "a.b.", "."])
    def test_trailing_dot_yields_empty(self, filename: str) -> None:
        assert extract_extension(filename) == ""

    def test_only_last_dot_counts(self) -> None:
        assert extract_extension("archive.tar.gz") == "gz"

    def test_lowercases_suffix(self) -> None:
        assert extract_extension("REPORT.PDF") == "pdf"
        assert extract_extension("Photo.JpEg") == "jpeg"

    def test_hidden_file_uses_text_after_dot(self) -> None:
        assert extract_extension(".bashrc") == "bashrc"


class TestClassify:
    """Test classify function."""

    def test_document(self) -> None:
        record = classify("project_proposal.docx")
        assert record.category is Category.DOCUMENTS
        assert record.priority == 1
        assert record.extension == "docx"
        assert record.filename == "project_proposal.docx"

    def test_source_code(self) -> None:
        record = classify("main_application.cpp")
        assert record.category is Category.SOURCE_CODE
        assert record.priority == 2

    def test_media_share_a_priority(self) -> None:
        assert classify("corporate_logo.png").priority == 3
        assert classify("conference_recording.mp3").priority == 3
        assert classify("training_video.mp4").priority == 3

    def test_archive(self) -> None:
        assert classify("backup_archive.zip").priority == 4

    def test_no_extension_is_miscellaneous(self) -> None:
        record = classify("readme_file")
        assert record.category is Category.MISCELLANEOUS
        assert record.priority == 5
        assert record.extension == ""

    def test_trailing_dot_is_miscellaneous(self) -> None:
        record = classify("notes.")
        assert record.category is Category.MISCELLANEOUS
        assert record.priority == 5

    def test_unrecognized_extension_is_miscellaneous(self) -> None:
        record = classify("configuration.ini")
        assert record.category is Category.MISCELLANEOUS
        assert record.extension == "ini"

    def test_case_insensitive(self) -> None:
        upper = classify("REPORT.PDF")
        lower = classify("report.pdf")
        assert (upper.category, upper.priority) == (lower.category, lower.priority)
        assert upper.filename == "REPORT.PDF"

    def test_compound_extension_uses_last_suffix(self) -> None:
        assert classify("backup.tar.gz").category is Category.MISCELLANEOUS
        assert classify("backup.gz.tar").category is Category.ARCHIVE

    @pytest.mark.parametrize("filename", ["", ".", "..", "   ", "....zip.", "été.ü"])
    def test_malformed_names_never_raise(self, filename: str) -> None:
        record = classify(filename)
        assert isinstance(record, ClassificationRecord)
        assert 1 <= record.priority <= 5

    def test_deterministic(self) -> None:
        assert classify("data_processor.py") == classify("data_processor.py")

    def test_logs_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="filesort.classifier"):
            classify("user_manual.doc")
        assert "user_manual.doc" in caplog.text
        assert "Documents" in caplog.text


class TestClassifyBatch:
    """Test classify_batch function."""

    def test_preserves_order_and_length(self) -> None:
        filenames = ["b.zip", "a.txt", "c", "d.mp4"]
        records = classify_batch(filenames)
        assert [record.filename for record in records] == filenames

    def test_empty_batch(self) -> None:
        assert classify_batch([]) == []

    def test_accepts_generators(self) -> None:
        records = classify_batch(name for name in ["x.py", "y.rar"])
        assert [record.category for record in records] == [Category.SOURCE_CODE, Category.ARCHIVE]

    def test_progress_callback_called_once_per_file(self) -> None:
        calls = []

        def progress(completed: int, total: int, record: ClassificationRecord) -> None:
            calls.append((completed, total, record.filename))

        classify_batch(["one.txt", "two.png", "three"], progress=progress)

        assert calls == [
            (1, 3, "one.txt"),
            (2, 3, "two.png"),
            (3, 3, "three"),
        ]

    def test_progress_not_called_for_empty_batch(self) -> None:
        calls = []
        classify_batch([], progress=lambda *args: calls.append(args))
        assert calls == []

    def test_concurrent_classify_matches_batch(self) -> None:
        filenames = demo_filenames() * 4
        with ThreadPoolExecutor(max_workers=8) as executor:
            concurrent = list(executor.map(classify, filenames))
        assert concurrent == classify_batch(filenames)

    def test_duplicates_produce_duplicate_records(self) -> None:
        records = classify_batch(["same.txt", "same.txt"])
        assert len(records) == 2
        assert records[0] == records[1]
