import unittest

from uptime_tracker.forms import InputValidationError, UrlForm


class UrlFormTests(unittest.TestCase):
    def test_update_url_replaces_draft_without_validation(self) -> None:
        form = UrlForm()
        form.update_url("not a url")

        self.assertEqual(form.value, "not a url")

    def test_submit_builds_check_request(self) -> None:
        form = UrlForm()
        form.update_url("https://example.com")

        request = form.submit()

        self.assertEqual(request.url, "https://example.com")

    def test_submit_keeps_draft(self) -> None:
        form = UrlForm()
        form.update_url("https://example.com/path?q=1")
        form.submit()

        self.assertEqual(form.value, "https://example.com/path?q=1")

    def test_submit_rejects_empty_and_malformed_input(self) -> None:
        for value in ("", "   ", "example.com", "ftp://example.com", "https://"):
            with self.subTest(value=value):
                form = UrlForm(value)
                with self.assertRaises(InputValidationError):
                    form.submit()
                self.assertEqual(form.value, value)

    def test_submit_strips_surrounding_whitespace(self) -> None:
        request = UrlForm("  https://example.com  ").submit()

        self.assertEqual(request.url, "https://example.com")


if __name__ == "__main__":
    unittest.main()
