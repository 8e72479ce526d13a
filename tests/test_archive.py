"""Tests for merging completed tasks into the archive."""

from minimal_task.archive import date_header, merge, merge_text


HEADER = "### 2024-01-02"
TASKS = ["- [x] Pay rent", "- [x] Drink water (2024-01-01)"]


class TestMerge:
    """Test the archive merge algorithm."""

    def test_empty_archive(self):
        assert merge([], TASKS, HEADER) == [HEADER] + TASKS

    def test_new_section_appended_after_blank_line(self):
        archive = ["### 2024-01-01", "- [x] Old task"]
        assert merge(archive, TASKS, HEADER) == archive + ["", HEADER] + TASKS

    def test_existing_section_at_end(self):
        archive = ["### 2024-01-01", "- [x] Old", "", "### 2024-01-02", "- [x] Earlier today"]
        result = merge(archive, TASKS, HEADER)
        assert result == archive + TASKS

    def test_existing_section_in_middle(self):
        archive = [
            "### 2024-01-02",
            "- [x] Earlier today",
            "### 2024-01-03",
            "- [x] Tomorrow's entry",
        ]
        result = merge(archive, TASKS, HEADER)
        assert result == [
            "### 2024-01-02",
            "- [x] Earlier today",
            "- [x] Pay rent",
            "- [x] Drink water (2024-01-01)",
            "### 2024-01-03",
            "- [x] Tomorrow's entry",
        ]

    def test_header_matched_after_trim(self):
        archive = ["  ### 2024-01-02  ", "- [x] Earlier"]
        result = merge(archive, ["- [x] New"], HEADER)
        assert result == ["  ### 2024-01-02  ", "- [x] Earlier", "- [x] New"]

    def test_unrelated_content_preserved(self):
        archive = ["# Done log", "Intro text", "", "### 2023-12-31", "- [x] NYE"]
        result = merge(archive, ["- [x] New"], HEADER)
        assert result[:5] == archive
        assert result[-2:] == [HEADER, "- [x] New"]

    def test_trailing_blank_lines_trimmed(self):
        """Tasks follow the last entry of an open section, not its trailing blanks."""
        archive = ["### 2024-01-02", "- [x] Earlier", "", ""]
        result = merge(archive, ["- [x] New"], HEADER)
        assert result == ["### 2024-01-02", "- [x] Earlier", "- [x] New"]

    def test_blank_line_before_next_header_kept(self):
        archive = ["### 2024-01-02", "- [x] Earlier", "", "### 2024-01-03", "- [x] Later"]
        result = merge(archive, ["- [x] New"], HEADER)
        assert result == [
            "### 2024-01-02",
            "- [x] Earlier",
            "",
            "- [x] New",
            "### 2024-01-03",
            "- [x] Later",
        ]

    def test_duplicate_header_not_reopened(self):
        archive = [
            "### 2024-01-02",
            "- [x] A",
            "### 2024-01-02",
            "- [x] B",
        ]
        result = merge(archive, ["- [x] New"], HEADER)
        assert result == [
            "### 2024-01-02",
            "- [x] A",
            "- [x] New",
            "### 2024-01-02",
            "- [x] B",
        ]
        assert result.count("- [x] New") == 1

    def test_merging_twice_duplicates_tasks(self):
        once = merge([], ["- [x] New"], HEADER)
        twice = merge(once, ["- [x] New"], HEADER)
        assert twice == [HEADER, "- [x] New", "- [x] New"]


class TestMergeText:
    """Test the text wrapper used when writing the archive."""

    def test_empty_text(self):
        assert merge_text("", ["- [x] New"], HEADER) == "### 2024-01-02\n- [x] New"

    def test_whitespace_only_text(self):
        assert merge_text("\n\n", ["- [x] New"], HEADER) == "### 2024-01-02\n- [x] New"

    def test_trailing_newline_removed(self):
        text = "### 2024-01-01\n- [x] Old\n"
        assert merge_text(text, ["- [x] New"], HEADER) == (
            "### 2024-01-01\n- [x] Old\n\n### 2024-01-02\n- [x] New"
        )

    def test_open_section_with_trailing_newline(self):
        text = "### 2024-01-01\n- [x] Old\n\n### 2024-01-02\n- [x] Earlier\n"
        assert merge_text(text, ["- [x] New"], HEADER) == (
            "### 2024-01-01\n- [x] Old\n\n### 2024-01-02\n- [x] Earlier\n- [x] New"
        )


def test_date_header():
    assert date_header("2024-01-02") == "### 2024-01-02"
    assert date_header("Jan 2", "## ") == "## Jan 2"
