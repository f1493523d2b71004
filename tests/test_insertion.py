"""Tests for inserting migrated lines into a section."""

from taskmigration.migration.insertion import append_at_section_end, insert_after_last_task
from taskmigration.migration.section import TaskSection
from taskmigration.vault.outline import parse_outline

NEW = ["- [ ] new one", "- [ ] new two"]


class TestAppendAtSectionEnd:
    def test_skips_trailing_blank_padding(self):
        lines = ["# Day", "## Tasks"]
        lines += [f"- [ ] task {i}" for i in range(2, 11)]  # lines 2-10
        lines += ["", "", "", ""]  # lines 11-14
        lines += ["## Notes", "- note"]
        result = append_at_section_end(lines, TaskSection(start_line=2, end_line=14), NEW)
        assert result[10] == "- [ ] task 10"
        assert result[11:13] == NEW
        assert result[13:17] == ["", "", "", ""]
        assert result[17] == "## Notes"
        assert len(result) == len(lines) + 2

    def test_unresolved_end_uses_document_end(self):
        lines = ["## Tasks", "- [ ] a", ""]
        result = append_at_section_end(lines, TaskSection(start_line=1, end_line=None), NEW)
        assert result == ["## Tasks", "- [ ] a", *NEW, ""]

    def test_empty_section_goes_under_heading(self):
        lines = ["## Tasks", "## Notes"]
        result = append_at_section_end(lines, TaskSection(start_line=1, end_line=0), NEW)
        assert result == ["## Tasks", *NEW, "## Notes"]

    def test_blank_only_section_goes_under_heading(self):
        lines = ["## Tasks", "", "", "## Notes"]
        result = append_at_section_end(lines, TaskSection(start_line=1, end_line=2), NEW)
        assert result == ["## Tasks", *NEW, "", "", "## Notes"]

    def test_whitespace_only_lines_count_as_blank(self):
        lines = ["## Tasks", "- [ ] a", "   ", "\t"]
        result = append_at_section_end(lines, TaskSection(start_line=1, end_line=None), NEW)
        assert result == ["## Tasks", "- [ ] a", *NEW, "   ", "\t"]

    def test_nothing_to_insert(self):
        lines = ["## Tasks", "- [ ] a"]
        result = append_at_section_end(lines, TaskSection(start_line=1, end_line=None), [])
        assert result == lines
        assert result is not lines

    def test_input_not_modified(self):
        lines = ["## Tasks", "- [ ] a"]
        append_at_section_end(lines, TaskSection(start_line=1, end_line=None), NEW)
        assert lines == ["## Tasks", "- [ ] a"]


class TestInsertAfterLastTask:
    def test_after_last_task_in_section(self):
        lines = [
            "## Tasks",
            "- [ ] a",
            "- note",
            "- [x] b",
            "",
            "## Notes",
            "- [ ] outside",
        ]
        outline = parse_outline("\n".join(lines))
        section = TaskSection(start_line=1, end_line=4)
        result = insert_after_last_task(lines, section, outline.list_items, NEW)
        assert result[:4] == lines[:4]
        assert result[4:6] == NEW
        assert result[6:] == lines[4:]

    def test_section_without_tasks_inserts_at_start(self):
        lines = ["## Tasks", "- plain note", "## Notes"]
        outline = parse_outline("\n".join(lines))
        section = TaskSection(start_line=1, end_line=1)
        result = insert_after_last_task(lines, section, outline.list_items, NEW)
        assert result == ["## Tasks", *NEW, "- plain note", "## Notes"]

    def test_empty_section(self):
        lines = ["## Tasks"]
        result = insert_after_last_task(lines, TaskSection(start_line=1, end_line=None), [], NEW)
        assert result == ["## Tasks", *NEW]

    def test_keeps_last_task_children_together(self):
        lines = [
            "## Tasks",
            "- [ ] existing",
            "  - note",
            "    - deeper note",
            "  continued text",
            "- plain sibling",
            "",
        ]
        outline = parse_outline("\n".join(lines))
        section = TaskSection(start_line=1, end_line=None)
        result = insert_after_last_task(lines, section, outline.list_items, NEW)
        assert result == [*lines[:5], *NEW, *lines[5:]]

    def test_nested_last_task_stops_at_its_sibling(self):
        lines = [
            "## Tasks",
            "- parent",
            "  - [ ] child task",
            "    - detail",
            "  - sibling note",
        ]
        outline = parse_outline("\n".join(lines))
        section = TaskSection(start_line=1, end_line=None)
        result = insert_after_last_task(lines, section, outline.list_items, NEW)
        assert result == [*lines[:4], *NEW, lines[4]]
