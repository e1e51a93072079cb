import pytest
from vertical_media.utils.url_parser import URLParser, parse, detect_platform, supported_platforms
from vertical_media.models.video import FailureReason, ParseFailure, Platform, VideoReference
from vertical_media.utils.validators import is_valid_id


class TestSanitizeURL:

    def test_trims_and_encodes_spaces(self):
        """Test surrounding whitespace is trimmed and inner spaces encoded"""
        assert URLParser.sanitize_url("  https://youtu.be/dQw4w9WgXcQ \n") == "https://youtu.be/dQw4w9WgXcQ"
        assert URLParser.sanitize_url("https://example.com/a b") == "https://example.com/a%20b"

    def test_strips_unsafe_characters(self):
        """Test control characters and unsafe characters are removed"""
        test_cases = [
            ("https://youtu.be/dQw4w9\x00WgXcQ", "https://youtu.be/dQw4w9WgXcQ"),
            ("https://youtu.be/<dQw4w9WgXcQ>", "https://youtu.be/dQw4w9WgXcQ"),
            ('https://youtu.be/"dQw4w9WgXcQ"', "https://youtu.be/dQw4w9WgXcQ"),
            ("https://example.com/%0d%0aSet-Cookie", "https://example.com/Set-Cookie"),
            ("https://example.com/%0%0dd", "https://example.com/"),
        ]

        for raw, expected in test_cases:
            assert URLParser.sanitize_url(raw) == expected

    def test_rejects_disallowed_protocols(self):
        """Test URLs with unsafe protocols sanitize to an empty string"""
        for raw in ["javascript:alert(1)", "data:text/html,hi", "vbscript:msgbox"]:
            assert URLParser.sanitize_url(raw) == ""

    def test_keeps_bare_tokens_and_allowed_protocols(self):
        """Test no scheme is added and allowed schemes pass through"""
        assert URLParser.sanitize_url("dQw4w9WgXcQ") == "dQw4w9WgXcQ"
        assert URLParser.sanitize_url("HTTPS://www.tiktok.com/t/ZTabc/") == "HTTPS://www.tiktok.com/t/ZTabc/"
        assert URLParser.sanitize_url("https;//youtu.be/dQw4w9WgXcQ") == "https://youtu.be/dQw4w9WgXcQ"

    def test_empty_input(self):
        for raw in ["", "   ", "\t\n", "<>"]:
            assert URLParser.sanitize_url(raw) == ""


class TestDetectPlatform:

    def test_detect_platform(self):
        """Test platform detection from URL hosts"""
        test_cases = [
            ("https://www.youtube.com/shorts/dQw4w9WgXcQ", Platform.YOUTUBE),
            ("https://m.youtube.com/watch?v=dQw4w9WgXcQ", Platform.YOUTUBE),
            ("https://youtu.be/dQw4w9WgXcQ", Platform.YOUTUBE),
            ("https://WWW.YOUTUBE.COM/shorts/dQw4w9WgXcQ", Platform.YOUTUBE),
            ("https://www.instagram.com/reel/Cabc123XY/", Platform.INSTAGRAM),
            ("https://www.tiktok.com/@someuser/video/7123456789012345678", Platform.TIKTOK),
            ("https://vm.tiktok.com/ZMabc123/", Platform.TIKTOK),
            ("www.youtube.com/shorts/dQw4w9WgXcQ", Platform.YOUTUBE),
            ("https://example.com/video", None),
            ("https://vimeo.com/12345", None),
            ("dQw4w9WgXcQ", None),
            ("not-a-url", None),
        ]

        for url, expected_platform in test_cases:
            assert detect_platform(url) == expected_platform, url

    def test_matches_host_not_path(self):
        """Test platform names in the path or query do not count"""
        assert detect_platform("https://example.com/youtube.com/shorts/dQw4w9WgXcQ") is None
        assert detect_platform("https://example.com/?next=https://www.tiktok.com/t/abc") is None


class TestParse:

    @pytest.mark.parametrize("url,platform", [
        ("https://www.youtube.com/shorts/dQw4w9WgXcQ", Platform.YOUTUBE),
        ("https://www.youtube.com/watch?v=dQw4w9WgXcQ", Platform.YOUTUBE),
        ("https://youtu.be/dQw4w9WgXcQ", Platform.YOUTUBE),
        ("https://www.youtube.com/embed/dQw4w9WgXcQ", Platform.YOUTUBE),
        ("https://www.instagram.com/reel/Cabc123XY/", Platform.INSTAGRAM),
        ("https://www.instagram.com/reels/Cabc123XY/", Platform.INSTAGRAM),
        ("https://www.instagram.com/p/Cabc123XY/", Platform.INSTAGRAM),
        ("https://www.tiktok.com/@someuser/video/7123456789012345678", Platform.TIKTOK),
        ("https://vm.tiktok.com/ZMabc123/", Platform.TIKTOK),
        ("https://www.tiktok.com/t/ZTRabc12/", Platform.TIKTOK),
    ])
    def test_auto_detects_every_supported_shape(self, url, platform):
        result = parse(url)

        assert isinstance(result, VideoReference)
        assert result.platform == platform
        assert is_valid_id(result.video_id, platform)

    def test_youtube_watch_url(self):
        result = parse("https://youtube.com/watch?v=dQw4w9WgXcQ", "auto")

        assert result.platform == Platform.YOUTUBE
        assert result.video_id == "dQw4w9WgXcQ"
        assert result.embed_url == "https://www.youtube.com/embed/dQw4w9WgXcQ"
        assert result.source_url == "https://youtube.com/watch?v=dQw4w9WgXcQ"

    def test_instagram_post_is_normalized_to_reel_embed(self):
        result = parse("https://www.instagram.com/p/Cabc123XY/", "auto")

        assert result.platform == Platform.INSTAGRAM
        assert result.video_id == "Cabc123XY"
        assert result.embed_url == "https://www.instagram.com/reel/Cabc123XY/embed/"

    def test_tiktok_video_url(self):
        result = parse("https://www.tiktok.com/@someuser/video/7123456789012345678", "auto")

        assert result.platform == Platform.TIKTOK
        assert result.video_id == "7123456789012345678"
        assert result.embed_url == "https://www.tiktok.com/embed/v2/7123456789012345678"

    def test_empty_input(self):
        for raw in ["", "   ", "javascript:alert(1)"]:
            result = parse(raw, "auto")
            assert isinstance(result, ParseFailure)
            assert result.reason == FailureReason.EMPTY_INPUT

    def test_unsupported_platform(self):
        result = parse("https://example.com/video", "auto")

        assert result.reason == FailureReason.UNSUPPORTED_PLATFORM
        assert result.url == "https://example.com/video"
        assert not result.ok

    def test_unknown_hint_is_unsupported(self):
        result = parse("https://vimeo.com/12345", "vimeo")
        assert result.reason == FailureReason.UNSUPPORTED_PLATFORM

    def test_no_identifier_found(self):
        result = parse("https://youtube.com/nonsense", "youtube")
        assert result.reason == FailureReason.NO_IDENTIFIER_FOUND

    def test_explicit_hint_skips_host_check(self):
        """Test a mismatched hint fails in the extractor, not the detector"""
        result = parse("https://www.instagram.com/reel/Cabc123XY/", "tiktok")
        assert result.reason == FailureReason.NO_IDENTIFIER_FOUND

    def test_hint_accepts_enum_and_any_case(self):
        assert parse("https://youtu.be/dQw4w9WgXcQ", Platform.YOUTUBE).video_id == "dQw4w9WgXcQ"
        assert parse("https://youtu.be/dQw4w9WgXcQ", "YouTube").video_id == "dQw4w9WgXcQ"
        assert parse("https://youtu.be/dQw4w9WgXcQ", "Auto").video_id == "dQw4w9WgXcQ"
        assert parse("https://youtu.be/dQw4w9WgXcQ", "AUTO").platform == Platform.YOUTUBE
        assert parse("https://vm.tiktok.com/ZMabc123/", "TIKTOK").video_id == "ZMabc123"

    def test_bare_youtube_id(self):
        """Test a bare ID is accepted with an explicit hint only"""
        result = parse("dQw4w9WgXcQ", "youtube")

        assert result.ok
        assert result.video_id == "dQw4w9WgXcQ"
        assert result.embed_url == "https://www.youtube.com/embed/dQw4w9WgXcQ"

        assert parse("dQw4w9WgXcQ", "auto").reason == FailureReason.UNSUPPORTED_PLATFORM

    def test_parse_is_idempotent(self):
        url = "https://www.youtube.com/shorts/dQw4w9WgXcQ?feature=share"

        first = parse(url)
        second = parse(url)

        assert first == second
        assert first.content_hash == second.content_hash

    def test_scheme_less_url_with_port(self):
        """Test a host:port prefix is read as a host, not as a protocol"""
        url = "www.youtube.com:443/shorts/dQw4w9WgXcQ"

        assert URLParser.sanitize_url(url) == url
        assert detect_platform(url) == Platform.YOUTUBE

        result = parse(url)
        assert result.ok
        assert result.video_id == "dQw4w9WgXcQ"

    def test_explicit_port(self):
        test_cases = [
            ("https://www.youtube.com:443/watch?v=dQw4w9WgXcQ", "dQw4w9WgXcQ"),
            ("https://www.instagram.com:443/reel/Cabc123XY/", "Cabc123XY"),
            ("https://vm.tiktok.com:443/ZMabc123/", "ZMabc123"),
        ]

        for url, expected_id in test_cases:
            assert parse(url).video_id == expected_id, url

    def test_never_raises_on_garbage(self):
        for raw in ["http://[::1", "::::", "https://", "@@@", "%%%", "\x00\x01\x02"]:
            result = parse(raw)
            assert isinstance(result, (VideoReference, ParseFailure))


class TestSupportedPlatforms:

    def test_supported_platforms(self):
        platforms = supported_platforms()

        assert list(platforms) == ["auto", "youtube", "instagram", "tiktok"]
        assert platforms["youtube"] == "YouTube Shorts"
        assert platforms["instagram"] == "Instagram Reels"

    def test_returns_a_copy(self):
        supported_platforms()["vimeo"] = "Vimeo"
        assert "vimeo" not in supported_platforms()
