"""
Tests for the compliance asset builders.
"""

import pytest

from retail_studio.engine.audit import evaluate_compliance
from retail_studio.engine.editor import add_elements, find_element
from retail_studio.engine.rules import evaluate
from retail_studio.models import ElementKind, ElementSubtype, get_format
from retail_studio.templates import build, get_builder_class, list_builders
from retail_studio.templates.lep import apply_lep_template
from retail_studio.templates.tags import LEGAL_TEXT, fit_box


class TestRegistry:
    """Tests for builder registration."""

    def test_all_builders_registered(self):
        assert set(list_builders()) >= {
            "value_tile.clubcard",
            "value_tile.new",
            "value_tile.white",
            "tag.exclusive",
            "tag.standard",
            "tag.legal",
            "drinkaware",
            "cta",
            "packshot",
            "lep",
        }

    def test_unknown_builder(self):
        with pytest.raises(ValueError):
            get_builder_class("value_tile.gold")


class TestValueTiles:
    """Tests for tile placement and layering."""

    def test_clubcard_tile_on_square(self, square, clean_oracle):
        """Test the tile lands in the bottom-right slot above everything."""
        bundle = build("value_tile.clubcard", [], square)
        tile, *labels = bundle

        assert tile.kind is ElementKind.SHAPE
        assert (tile.frame.x, tile.frame.y) == (790, 790)
        assert tile.z_index == 50
        assert tile.locked
        assert [label.content for label in labels] == ["Clubcard Price", "£3.50", "Was £4.50"]
        assert all(label.z_index == 51 and label.locked for label in labels)

        report = evaluate_compliance(bundle, square, clean_oracle)
        assert len(report.issues) == 2
        assert all(issue.startswith("Legal Fail") for issue in report.issues)

    def test_clubcard_with_legal_tag_is_clean(self, square, clean_oracle):
        elements = build("value_tile.clubcard", [], square)
        elements = add_elements(elements, build("tag.legal", elements, square))
        legal = elements[-1]
        assert legal.content == LEGAL_TEXT
        assert legal.z_index == 61

        report = evaluate_compliance(elements, square, clean_oracle)
        assert report.issues == []
        assert report.is_compliant

    def test_price_options(self, square):
        bundle = build("value_tile.clubcard", [], square, offer_price="£1.00", regular_price="£2.00")
        assert [el.content for el in bundle[1:]] == ["Clubcard Price", "£1.00", "Was £2.00"]
        white = build("value_tile.white", [], square, price="£0.99")
        assert white[1].content == "£0.99"

    def test_elevated_above_existing(self, make_element, square):
        elements = [make_element("t", z=120, font_size=48)]
        tile = build("value_tile.new", elements, square)[0]
        assert tile.z_index == 170

    @pytest.mark.parametrize("path", ["value_tile.clubcard", "value_tile.new", "value_tile.white"])
    def test_story_tile_clear_of_safe_zone(self, path, story):
        bundle = build(path, [], story)
        findings = evaluate(bundle, story, [LEGAL_TEXT], False)
        assert not [issue for issue in findings.issues if "Safe Zone" in issue]
        assert bundle[0].frame.bottom <= 1920 - 250

    def test_content_stacked_later_obscures_tile(self, make_element, square):
        elements = build("value_tile.new", [], square)
        sticker = make_element("sticker", "image", x=800, y=800, width=50, height=50, z=100)
        findings = evaluate([*elements, sticker], square, [], False)
        # Backing shape and label are both obscured
        assert findings.score_delta == -40


class TestTags:
    """Tests for single-element assets."""

    def test_cta_centred(self, square):
        cta = build("cta", [], square)[0]
        assert cta.subtype is ElementSubtype.CTA_PRIMARY
        assert (cta.frame.x, cta.frame.y) == (415, 510)
        assert cta.content == "Shop Now"

    def test_cta_label_option(self, square):
        assert build("cta", [], square, label="Buy")[0].content == "Buy"

    def test_exclusive_tag(self, square):
        tag = build("tag.exclusive", [], square)[0]
        assert tag.content == "Only at Tesco"
        assert tag.style.font_size >= 20

    def test_drinkaware_satisfies_alcohol_rule(self, square):
        lockup = build("drinkaware", [], square)
        findings = evaluate(lockup, square, ["Red wine"], True)
        assert findings.issues == []

    def test_legal_above_story_safe_zone(self, story):
        legal = build("tag.legal", [], story)[0]
        assert legal.frame.bottom <= 1920 - 250

    def test_packshot_fitted(self, square):
        packshot = build("packshot", [], square, image="data:image/png;base64,AA==",
                         image_width=600, image_height=300)[0]
        assert (packshot.frame.width, packshot.frame.height) == (300, 150)
        assert packshot.subtype is ElementSubtype.PACKSHOT

    def test_packshot_requires_image(self, square):
        with pytest.raises(ValueError):
            build("packshot", [], square)

    def test_fit_box(self):
        assert fit_box(100, 400, 300) == (75, 300)
        assert fit_box(300, 300, 300) == (300, 300)


class TestLepTemplate:
    """Tests for the LEP starter layout."""

    def test_replaces_cta(self, make_element, square, clean_oracle):
        elements = [
            make_element("cta", "shape", x=400, y=900, width=250, height=60,
                         subtype="cta-primary", z=30),
        ]
        result = apply_lep_template(elements, square)

        assert find_element(result, "cta") is None
        subtypes = [el.subtype for el in result]
        assert ElementSubtype.PACKSHOT in subtypes
        assert ElementSubtype.LEP_LOGO in subtypes
        assert ElementSubtype.LEGAL_TEXT in subtypes

        report = evaluate_compliance(result, square, clean_oracle)
        assert report.issues == []

    def test_background_and_packshot_image(self, square):
        result = apply_lep_template([], square, packshot_image="https://cdn.example/p.png")
        background = result[0]
        assert background.is_background
        assert (background.frame.width, background.frame.height) == (1080, 1080)
        packshot = next(el for el in result if el.subtype is ElementSubtype.PACKSHOT)
        assert packshot.content == "https://cdn.example/p.png"
        assert (packshot.frame.x, packshot.frame.y) == (290, 340)

    @pytest.mark.parametrize("format_id", ["sq", "story", "landscape"])
    def test_clean_on_every_format(self, format_id, clean_oracle):
        """Test the layout passes the audit alone on each format."""
        fmt = get_format(format_id)
        report = evaluate_compliance(apply_lep_template([], fmt), fmt, clean_oracle)
        assert report.issues == []

    def test_story_headline_below_top_band(self, story):
        headline = next(el for el in apply_lep_template([], story) if el.content == "LOW EVERYDAY PRICE")
        assert headline.frame.y >= 200
