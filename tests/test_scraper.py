from __future__ import annotations

import unittest
from unittest.mock import MagicMock, patch

import requests

from custom_components.meal_planner.exceptions import MarkupUnavailable
from custom_components.meal_planner.extractors.scraper import fetch_recipe_html, validate_url

SCRAPER = "custom_components.meal_planner.extractors.scraper.cloudscraper"


def make_response(content_type: str = "text/html; charset=utf-8", chunks=(b"<html>", b"</html>")):
    response = MagicMock()
    response.headers = {"content-type": content_type}
    response.iter_content.return_value = list(chunks)
    return response


class ValidateUrlTests(unittest.TestCase):
    def test_accepts_public_http_urls(self) -> None:
        validate_url("https://cookpad.com/recipe/123")
        validate_url("http://93.184.216.34/recipe")

    def test_rejects_invalid_urls(self) -> None:
        for url in ("", "   ", "ftp://example.com/file", "https://", "file:///etc/passwd"):
            with self.subTest(url=url):
                with self.assertRaises(ValueError):
                    validate_url(url)

    def test_rejects_internal_addresses(self) -> None:
        for url in ("http://127.0.0.1/", "http://192.168.1.10/recipe", "http://169.254.1.1/"):
            with self.subTest(url=url):
                with self.assertRaises(ValueError):
                    validate_url(url)


class FetchRecipeHtmlTests(unittest.TestCase):
    def test_returns_page_body(self) -> None:
        with patch(SCRAPER) as cloudscraper:
            session = cloudscraper.create_scraper.return_value
            session.get.return_value = make_response()

            html = fetch_recipe_html("https://example.com/recipe", timeout=5)

        self.assertEqual(html, b"<html></html>")
        session.get.assert_called_once_with(
            "https://example.com/recipe", timeout=5, allow_redirects=True, stream=True)

    def test_http_error_is_not_retried(self) -> None:
        with patch(SCRAPER) as cloudscraper:
            session = cloudscraper.create_scraper.return_value
            response = make_response()
            response.raise_for_status.side_effect = requests.exceptions.HTTPError("403 Forbidden")
            session.get.return_value = response

            with self.assertRaises(MarkupUnavailable) as ctx:
                fetch_recipe_html("https://example.com/recipe")

        self.assertEqual(ctx.exception.url, "https://example.com/recipe")
        self.assertEqual(session.get.call_count, 1)

    def test_timeout_surfaces_as_markup_unavailable(self) -> None:
        with patch(SCRAPER) as cloudscraper:
            session = cloudscraper.create_scraper.return_value
            session.get.side_effect = requests.exceptions.Timeout("timed out")

            with self.assertRaises(MarkupUnavailable):
                fetch_recipe_html("https://example.com/recipe")

        self.assertEqual(session.get.call_count, 1)

    def test_non_html_content_is_rejected(self) -> None:
        with patch(SCRAPER) as cloudscraper:
            session = cloudscraper.create_scraper.return_value
            session.get.return_value = make_response(content_type="application/pdf")

            with self.assertRaises(MarkupUnavailable) as ctx:
                fetch_recipe_html("https://example.com/recipe.pdf")

        self.assertIn("Invalid content type", ctx.exception.reason)

    def test_invalid_url_is_rejected_before_fetching(self) -> None:
        with patch(SCRAPER) as cloudscraper:
            with self.assertRaises(ValueError):
                fetch_recipe_html("ftp://example.com/recipe")

        cloudscraper.create_scraper.assert_not_called()


if __name__ == "__main__":
    unittest.main()
