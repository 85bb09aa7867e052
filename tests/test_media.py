"""Tests for components/media.py and components/loader.py helpers."""

from components.loader import LOADER_HTML
from components.media import VIDEO_HEIGHT, VIDEO_WIDTH, plain_markdown, video_embed_html


class TestVideoEmbed:
    def test_frame_points_at_url(self):
        html = video_embed_html("https://www.youtube.com/embed/abc123?rel=0")

        assert html.startswith("<iframe")
        assert 'src="https://www.youtube.com/embed/abc123?rel=0"' in html
        assert f'width="{VIDEO_WIDTH}"' in html
        assert f'height="{VIDEO_HEIGHT}"' in html
        assert 'title="NASA Video of the Day"' in html
        assert "allowfullscreen" in html

    def test_url_is_escaped(self):
        html = video_embed_html('https://x.test/"><script>')

        assert "<script>" not in html
        assert "&quot;" in html


class TestLoader:
    def test_four_cube_faces(self):
        assert LOADER_HTML.count('class="cube-span"') == 4
        assert "cube-top" in LOADER_HTML


class TestPlainMarkdown:
    def test_specials_are_escaped(self):
        assert plain_markdown("$5 *bright* stars_") == r"\$5 \*bright\* stars\_"

    def test_links_and_headers_are_escaped(self):
        assert plain_markdown("# [M31](x)") == r"\# \[M31\](x)"

    def test_ordinary_text_unchanged(self):
        text = "Saturn's rings, seen by Cassini on 2017-09-13."
        assert plain_markdown(text) == text
