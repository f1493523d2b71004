"""Tests for locating the task section under a heading."""

from taskmigration.migration.section import TaskSection, find_task_section
from taskmigration.vault.outline import parse_outline


class TestFindTaskSection:
    def test_bounded_by_next_same_level_heading(self):
        outline = parse_outline("# Day\n## Tasks\n- [ ] a\n- [ ] b\n## Notes\n- n\n")
        assert find_task_section(outline, "Tasks", 2) == TaskSection(start_line=2, end_line=3)

    def test_deeper_headings_stay_inside(self):
        outline = parse_outline("## Tasks\n- a\n### Work\n- b\n## Notes\n")
        assert find_task_section(outline, "Tasks", 2) == TaskSection(start_line=1, end_line=3)

    def test_shallower_heading_does_not_end_section(self):
        outline = parse_outline("## Tasks\n- a\n# Top\n- b\n## Notes\n")
        assert find_task_section(outline, "Tasks", 2) == TaskSection(start_line=1, end_line=3)

    def test_last_section_is_unresolved(self):
        outline = parse_outline("## Notes\n## Tasks\n- [ ] a\n")
        section = find_task_section(outline, "Tasks", 2)
        assert section == TaskSection(start_line=2, end_line=None)
        assert section.contains(10_000)

    def test_adjacent_heading_gives_empty_section(self):
        outline = parse_outline("## Tasks\n## Notes\n")
        section = find_task_section(outline, "Tasks", 2)
        assert section is not None
        assert section.start_line == section.end_line + 1
        assert section.is_empty()
        assert not section.contains(0)
        assert not section.contains(1)

    def test_level_must_match(self):
        outline = parse_outline("### Tasks\n- [ ] a\n")
        assert find_task_section(outline, "Tasks", 2) is None

    def test_name_must_match_exactly(self):
        outline = parse_outline("## Tasks for today\n- [ ] a\n")
        assert find_task_section(outline, "Tasks", 2) is None

    def test_first_matching_heading_wins(self):
        outline = parse_outline("## Tasks\n- [ ] a\n## Tasks\n- [ ] b\n")
        assert find_task_section(outline, "Tasks", 2) == TaskSection(start_line=1, end_line=1)

    def test_no_outline(self):
        assert find_task_section(None, "Tasks", 2) is None

    def test_no_headings(self):
        assert find_task_section(parse_outline("- [ ] a\n"), "Tasks", 2) is None


class TestTaskSection:
    def test_contains_is_inclusive(self):
        section = TaskSection(start_line=2, end_line=4)
        assert [section.contains(i) for i in range(6)] == [False, False, True, True, True, False]

    def test_heading_line(self):
        assert TaskSection(start_line=5, end_line=9).heading_line == 4

    def test_resolve_end(self):
        assert TaskSection(start_line=1, end_line=None).resolve_end(10) == 9
        assert TaskSection(start_line=1, end_line=4).resolve_end(10) == 4
        assert TaskSection(start_line=1, end_line=40).resolve_end(10) == 9
