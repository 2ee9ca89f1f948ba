import pytest
from heuristics import (
    HeuristicScorer,
    MediaHeuristics,
    TextHeuristics,
    UrlHeuristics,
    extract_domain,
    score_media,
    score_text,
    score_url,
)


def _assert_well_formed(result):
    assert 0 <= result.credibility_score <= 100
    assert result.confidence_breakdown.total == pytest.approx(1.0, abs=1e-6)
    assert all(0.0 <= c.confidence <= 1.0 for c in result.flagged_claims)
    assert all(0.0 <= s.credibility <= 1.0 for s in result.verified_sources)
    assert result.summary


class TestTextHeuristics:
    def test_suspicious_keywords_scenario(self):
        """Test keyword penalties on sensational text."""
        text = "BREAKING: shocking secret revealed".ljust(60, ".")
        result = score_text(text)

        assert result.credibility_score == 40
        assert len(result.flagged_claims) == 3
        assert len(result.verified_sources) == 1
        assert result.deepfake_status is None
        assert [c.claim for c in result.flagged_claims] == [
            'Contains suspicious keyword: "breaking"',
            'Contains suspicious keyword: "shocking"',
            'Contains suspicious keyword: "secret"',
        ]
        assert all(c.confidence == 0.7 for c in result.flagged_claims)
        assert all(c.sources == ["Pattern Analysis"] for c in result.flagged_claims)
        _assert_well_formed(result)

    def test_clean_long_text_keeps_baseline(self):
        """Test that clean text keeps the baseline score."""
        text = "The city council approved the annual budget after a public hearing on Tuesday."
        result = score_text(text)
        assert result.credibility_score == 85
        assert result.flagged_claims == []
        assert "85/100" in result.summary

    def test_short_text_penalty(self):
        """Test the short text penalty."""
        result = score_text("Short note.")
        assert result.credibility_score == 75
        assert len(result.flagged_claims) == 1
        assert result.flagged_claims[0].confidence == 0.6
        assert "too short" in result.flagged_claims[0].claim

    def test_score_clamped_at_zero(self):
        """Test that stacked penalties cannot go below zero."""
        text = "breaking exclusive shocking unbelievable doctors hate this secret"
        result = TextHeuristics().score(text[:45])
        assert result.credibility_score >= 0
        full = score_text("Breaking exclusive shocking unbelievable: doctors hate this secret!!")
        assert full.credibility_score == 0
        assert len(full.flagged_claims) == 6

    def test_keyword_match_is_case_insensitive(self):
        """Test case-insensitive keyword matching."""
        result = score_text("UNBELIEVABLE results reported in the quarterly earnings statement today.")
        assert result.credibility_score == 70

    def test_fixed_breakdown_and_source(self):
        """Test the fixed text breakdown and guideline source."""
        result = score_text("x" * 80)
        assert result.confidence_breakdown.trusted == 0.8
        assert result.verified_sources[0].title == "Fact-checking guidelines"
        assert result.verified_sources[0].credibility == 0.9


class TestUrlHeuristics:
    def test_trusted_domain(self):
        """Test the trusted domain bonus."""
        result = score_url("https://www.bbc.com/news/story")
        assert result.credibility_score == 90
        assert result.flagged_claims == []
        assert "www.bbc.com" in result.summary
        _assert_well_formed(result)

    def test_suspicious_domain(self):
        """Test the suspicious domain penalty."""
        result = score_url("https://fakenews.com/x")
        assert result.credibility_score == 40
        assert len(result.flagged_claims) == 1
        assert "unreliable domain" in result.flagged_claims[0].claim
        assert result.flagged_claims[0].confidence == 0.8
        assert result.flagged_claims[0].sources == ["Domain Analysis"]

    def test_unknown_domain_keeps_baseline(self):
        """Test that an unlisted domain keeps the baseline."""
        result = score_url("https://example.org/article")
        assert result.credibility_score == 70
        assert result.flagged_claims == []

    def test_unparseable_url_uses_raw_string(self):
        """Test domain matching against a URL that does not parse."""
        assert extract_domain("reuters.com/world") == "reuters.com/world"
        assert score_url("reuters.com/world").credibility_score == 90

    def test_domain_match_is_case_insensitive(self):
        """Test case-insensitive domain matching."""
        assert UrlHeuristics().score("https://WWW.NPR.ORG/sections").credibility_score == 90

    def test_fixed_breakdown(self):
        """Test the fixed URL breakdown."""
        breakdown = score_url("https://ap.org").confidence_breakdown
        assert (breakdown.trusted, breakdown.neutral, breakdown.suspicious) == (0.9, 0.05, 0.05)


class TestMediaHeuristics:
    def test_fake_draw_scenario(self):
        """Test a high draw classified as fake."""
        result = score_media("https://cdn.example.com/clip.mp4", "video", draw=lambda: 0.95)
        assert result.deepfake_status == "fake"
        assert result.credibility_score == 15
        assert len(result.flagged_claims) == 1
        assert result.flagged_claims[0].confidence == pytest.approx(0.95)
        assert result.flagged_claims[0].sources == ["Deepfake Detection AI"]
        assert "fake" in result.summary
        _assert_well_formed(result)

    @pytest.mark.parametrize("draw,status,score", [
        (0.0, "real", 85),
        (0.3, "real", 85),
        (0.31, "uncertain", 50),
        (0.8, "uncertain", 50),
        (0.81, "fake", 15),
    ])
    def test_classification_thresholds(self, draw, status, score):
        """Test the real, uncertain and fake draw thresholds."""
        result = MediaHeuristics(draw=lambda: draw).score("photo.jpg", "image")
        assert result.deepfake_status == status
        assert result.credibility_score == score
        assert status in result.summary

    def test_non_fake_has_no_flagged_claims(self):
        """Test that only fake media carries a flagged claim."""
        result = MediaHeuristics(draw=lambda: 0.5).score("photo.jpg", "image")
        assert result.flagged_claims == []

    def test_frame_findings_depend_on_media_type(self):
        """Test image and video frame findings."""
        image = MediaHeuristics(draw=lambda: 0.1).score("photo.jpg", "image")
        video = MediaHeuristics(draw=lambda: 0.1).score("clip.mp4", "video")
        assert len(image.frame_findings) == 1
        assert len(video.frame_findings) == 1
        assert image.frame_findings != video.frame_findings
        assert "Edge consistency" in image.frame_findings[0]
        assert "Key frame" in video.frame_findings[0]

    def test_out_of_range_draw_is_clamped(self):
        """Test clamping of draws outside the unit interval."""
        result = MediaHeuristics(draw=lambda: 1.7).score("clip.mp4", "video")
        assert result.flagged_claims[0].confidence == 1.0

    def test_default_draw_produces_valid_result(self):
        """Test media scoring with the default random draw."""
        for _ in range(20):
            _assert_well_formed(MediaHeuristics().score("photo.jpg", "image"))


class TestHeuristicScorer:
    def test_dispatch(self):
        """Test dispatch to the heuristic for each input type."""
        scorer = HeuristicScorer(media_heuristics=MediaHeuristics(draw=lambda: 0.9))
        assert scorer.score("url", "https://reuters.com/a").credibility_score == 90
        assert scorer.score("image", "photo.jpg").deepfake_status == "fake"
        assert scorer.score("text", "y" * 60).deepfake_status is None

    def test_unsupported_type_raises(self):
        """Test that an unknown input type raises."""
        with pytest.raises(ValueError):
            HeuristicScorer().score("audio", "clip.mp3")
