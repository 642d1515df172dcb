"""
tableview Renderer -- Table Tests

Header cells with sort links and indicators, body rows with highlighted
cells, the search form, and the full page wrapper.
"""

from tableview.kernel.engine import compute_view
from tableview.kernel.renderer import render_header, render_page, render_search, render_table, state_url
from tableview.kernel.types import RenderOptions, ViewState


def assert_contains(html, *fragments):
    for fragment in fragments:
        assert fragment in html, (
            f"Expected to find {fragment!r} in rendered HTML.\nGot (first 3000 chars):\n{html[:3000]}"
        )


def assert_not_contains(html, *fragments):
    for fragment in fragments:
        assert fragment not in html, f"Did NOT expect to find {fragment!r} in rendered HTML."


def assert_order(html, *names):
    positions = [(name, html.find(name)) for name in names]
    for name, pos in positions:
        assert pos != -1, f"{name!r} not found in HTML"
    for (a, pa), (b, pb) in zip(positions, positions[1:]):
        assert pa < pb, f"Expected {a!r} before {b!r}"


def render(recordset, state):
    return render_table(recordset, state, compute_view(recordset, state))


class TestHeader:
    def test_columns_in_order(self, mixed_recordset):
        html = render_header(mixed_recordset, ViewState())
        assert_order(html, "Full Name", "Email", "City")

    def test_header_links_to_ascending_sort(self, mixed_recordset):
        html = render_header(mixed_recordset, ViewState())
        assert_contains(html, 'href="/?sort=fullname&amp;dir=asc"')

    def test_active_header_links_to_flipped_direction(self, mixed_recordset):
        html = render_header(mixed_recordset, ViewState(sort_column="city"))
        assert_contains(html, 'href="/?sort=city&amp;dir=desc"', 'href="/?sort=email&amp;dir=asc"')

    def test_indicator_on_active_column_only(self, mixed_recordset):
        html = render_header(mixed_recordset, ViewState(sort_column="email", ascending=False))
        assert html.count("sort-indicator") == 1
        assert_contains(html, 'Email <span class="sort-indicator">▼</span>')

    def test_no_indicator_without_sort(self, mixed_recordset):
        assert_not_contains(render_header(mixed_recordset, ViewState()), "▲", "▼")

    def test_header_keeps_query(self, mixed_recordset):
        html = render_header(mixed_recordset, ViewState(query="bob"))
        assert_contains(html, 'href="/?q=bob&amp;sort=fullname&amp;dir=asc"')


class TestBody:
    def test_rows_rendered_in_result_order(self, mixed_recordset):
        html = render(mixed_recordset, ViewState(sort_column="city"))
        assert_order(html, 'data-row-id="r3"', 'data-row-id="r2"', 'data-row-id="r4"')

    def test_cells_highlighted(self, mixed_recordset):
        html = render(mixed_recordset, ViewState(query="stone"))
        assert_contains(html, 'Bob <span class="highlight">Stone</span>')

    def test_absent_values_render_empty(self, mixed_recordset):
        html = render(mixed_recordset, ViewState(query="nobody"))
        assert_contains(html, 'data-row-id="r5"')
        assert_not_contains(html, "None")

    def test_values_are_escaped(self, mixed_recordset):
        html = render(mixed_recordset, ViewState(query="c++"))
        assert_contains(html, 'Carl (<span class="highlight">C++</span>) Dev')

    def test_row_links_select_row(self, mixed_recordset):
        html = render(mixed_recordset, ViewState(query="austin"))
        assert_contains(html, 'href="/?q=austin&amp;selected=r2"')

    def test_empty_state(self, mixed_recordset):
        html = render(mixed_recordset, ViewState(query="no such thing"))
        assert_contains(html, "No matching records.", 'colspan="3"')
        assert_not_contains(html, "tableview-row")


class TestSearchForm:
    def test_query_prefilled_and_escaped(self):
        html = render_search(ViewState(query='a"b'))
        assert_contains(html, 'value="a&quot;b"', 'name="q"')

    def test_placeholder(self):
        assert_contains(render_search(ViewState()), 'placeholder="Search by Fullname or other fields..."')

    def test_sort_carried_page_dropped(self):
        html = render_search(ViewState(sort_column="city", ascending=False, page=3))
        assert_contains(html, 'name="sort" value="city"', 'name="dir" value="desc"')
        assert_not_contains(html, 'name="page"')

    def test_search_can_be_omitted(self, mixed_recordset):
        state = ViewState()
        html = render_table(mixed_recordset, state, compute_view(mixed_recordset, state), RenderOptions(include_search=False))
        assert_not_contains(html, "search-form")


class TestStateUrl:
    def test_default_state_is_base_path(self):
        assert state_url(ViewState()) == "/"

    def test_base_path_option(self):
        assert state_url(ViewState(page=2), RenderOptions(base_path="/contacts")) == "/contacts?page=2"

    def test_query_is_encoded(self):
        assert state_url(ViewState(query="a&b c")) == "/?q=a%26b+c"


class TestPage:
    def test_full_document(self, mixed_recordset):
        state = ViewState()
        html = render_page(mixed_recordset, state, compute_view(mixed_recordset, state), RenderOptions(title="People"))
        assert html.startswith("<!DOCTYPE html>")
        assert_contains(html, "<title>People</title>", "<h1>People</h1>", "<style>", "</html>")

    def test_deterministic(self, mixed_recordset):
        state = ViewState(query="o", sort_column="fullname")
        result = compute_view(mixed_recordset, state)
        outputs = {render_page(mixed_recordset, state, result) for _ in range(20)}
        assert len(outputs) == 1
