"""Tests for breadcrumb generation."""

from ewiki.core.breadcrumbs import HOME_LABEL, BreadcrumbItem, build_breadcrumbs


class TestBuildBreadcrumbs:
    """Tests for build_breadcrumbs()."""

    def test__nested_file__links_cumulative_prefixes(self) -> None:
        crumbs = build_breadcrumbs("/wiki/", "a/b/c.md")

        assert [c.href for c in crumbs] == ["/wiki/", "/wiki/a/", "/wiki/a/b/", None]
        assert [c.label for c in crumbs] == [HOME_LABEL, "a", "b", "c"]

    def test__last_item__is_active_and_inert(self) -> None:
        crumbs = build_breadcrumbs("/", "a/b/c.md")

        assert crumbs[-1] == BreadcrumbItem(label="c", href=None, active=True)
        assert not any(c.active for c in crumbs[:-1])

    def test__home_item__links_base_path(self) -> None:
        crumbs = build_breadcrumbs("/docs/", "guide.md")

        assert crumbs[0] == BreadcrumbItem(label=HOME_LABEL, href="/docs/", home=True)
        assert len(crumbs) == 2

    def test__root_base_path__builds_links_without_double_slash(self) -> None:
        crumbs = build_breadcrumbs("/", "a/b.md")

        assert crumbs[1].href == "/a/"

    def test__empty_path__returns_single_inert_home(self) -> None:
        crumbs = build_breadcrumbs("/wiki/", "")

        assert crumbs == [
            BreadcrumbItem(label=HOME_LABEL, href=None, active=True, home=True),
        ]

    def test__special_characters__are_percent_encoded_per_segment(self) -> None:
        crumbs = build_breadcrumbs("/wiki/", "a b/c&d/ä?/page.md")

        assert crumbs[1].href == "/wiki/a%20b/"
        assert crumbs[2].href == "/wiki/a%20b/c%26d/"
        assert crumbs[3].href == "/wiki/a%20b/c%26d/%C3%A4%3F/"

    def test__labels__stay_raw(self) -> None:
        """Labels are escaped by the template, not here."""
        crumbs = build_breadcrumbs("/", "<b>/x.md")

        assert crumbs[1].label == "<b>"

    def test__uri_component_safe_characters__are_kept(self) -> None:
        crumbs = build_breadcrumbs("/", "it's(1)!*/x.md")

        assert crumbs[1].href == "/it's(1)!*/"

    def test__padded_segments__keep_spaces_in_links_but_not_labels(self) -> None:
        crumbs = build_breadcrumbs("/wiki/", " notes / draft.md ")

        assert crumbs[1].href == "/wiki/%20notes%20/"
        assert crumbs[1].label == "notes"
        assert crumbs[-1].label == "draft"

    def test__file_without_extension__keeps_name(self) -> None:
        crumbs = build_breadcrumbs("/", "notes/README")

        assert crumbs[-1].label == "README"

    def test__to_dict__serializes_fields(self) -> None:
        item = BreadcrumbItem(label="a", href="/a/")

        assert item.to_dict() == {
            "label": "a",
            "href": "/a/",
            "active": False,
            "home": False,
        }
