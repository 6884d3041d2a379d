import re
import unittest

from uptime_tracker.models import RegionResult
from uptime_tracker.notifier import Notice
from uptime_tracker.state import UIState
from uptime_tracker.ui import render_page, render_results_html


def _items(html: str) -> list[str]:
    return [re.sub(r"<[^>]+>", "", li) for li in re.findall(r"<li[^>]*>.*?</li>", html)]


SCENARIO = [
    RegionResult(region="us-east", status="up", responseTime=120),
    RegionResult(region="eu-west", status="down", responseTime=None),
]


class ResultsHtmlTests(unittest.TestCase):
    def test_renders_one_item_per_result_in_order(self) -> None:
        html = render_results_html(SCENARIO)

        self.assertEqual(
            _items(html),
            ["us-east: up (Response Time: 120 ms)", "eu-west: down"],
        )
        self.assertIn('data-region="us-east"', html)
        self.assertIn("Uptime Results:", html)

    def test_empty_result_set_renders_empty_list(self) -> None:
        html = render_results_html([])

        self.assertIn('<div class="results">', html)
        self.assertIn("<ul></ul>", html)
        self.assertEqual(_items(html), [])

    def test_server_text_is_escaped(self) -> None:
        html = render_results_html(
            [RegionResult(region="<b>x</b>", status="up & running")]
        )

        self.assertNotIn("<b>x</b>", html)
        self.assertIn("&lt;b&gt;x&lt;/b&gt;", html)
        self.assertIn("up &amp; running", html)

    def test_does_not_mutate_input(self) -> None:
        results = list(SCENARIO)
        render_results_html(results)

        self.assertEqual(results, SCENARIO)


class PageTests(unittest.TestCase):
    def test_idle_page_without_results(self) -> None:
        html = render_page(UIState(), year=2026)

        self.assertNotIn("Checking uptime...", html)
        self.assertNotIn('class="results"', html)
        self.assertNotIn("http-equiv", html)
        self.assertIn('type="url"', html)
        self.assertIn("required", html)
        self.assertIn('placeholder="Enter website URL"', html)
        self.assertIn("Check Uptime", html)
        self.assertIn("&copy; 2026 Global Uptime Tracker", html)

    def test_loading_shows_busy_indicator_and_refreshes(self) -> None:
        html = render_page(UIState(loading=True), refresh_seconds=3)

        self.assertIn("Checking uptime...", html)
        self.assertIn('<meta http-equiv="refresh" content="3">', html)

    def test_stale_results_stay_visible_while_loading(self) -> None:
        html = render_page(UIState(loading=True, results=SCENARIO))

        self.assertIn("Checking uptime...", html)
        self.assertEqual(len(_items(html)), 2)

    def test_empty_results_render_container(self) -> None:
        html = render_page(UIState(results=[]))

        self.assertIn('class="results"', html)
        self.assertEqual(_items(html), [])

    def test_notice_banner_is_dismissible(self) -> None:
        notice = Notice(
            id=7,
            level="error",
            message="Error checking uptime. Please try again.",
            created_at="2026-10-18T00:00:00+00:00",
        )
        html = render_page(UIState(), notice=notice)

        self.assertIn('role="alert"', html)
        self.assertIn("Error checking uptime. Please try again.", html)
        self.assertIn('action="/notice/dismiss"', html)
        self.assertIn('name="notice_id" value="7"', html)

    def test_draft_and_validation_hint_are_rendered_escaped(self) -> None:
        html = render_page(
            UIState(), draft='not a "url"', invalid_message="Enter a valid website URL."
        )

        self.assertIn('value="not a &quot;url&quot;"', html)
        self.assertIn("Enter a valid website URL.", html)


if __name__ == "__main__":
    unittest.main()
