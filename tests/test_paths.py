"""Tests for phenotype path access."""

import pytest

from hatchery.exceptions import GeneticsError, UnknownPathError
from hatchery.genetics import PhenotypePath, all_paths


class TestParse:
    def test_trait_path(self, catalog):
        path = PhenotypePath.parse("traits.body_size.name", catalog)
        assert path.gene == "body_size"
        assert path.genes == ("body_size",)
        assert str(path) == "traits.body_size.name"

    def test_color_display_name_genes(self, catalog):
        path = PhenotypePath.parse("color.displayName", catalog)
        assert path.genes == ("color_cyan", "color_magenta", "color_yellow")

    def test_specialty_name_spans_color_and_finish(self, catalog):
        path = PhenotypePath.parse("color.specialtyName", catalog)
        assert set(path.genes) == {
            "color_cyan", "color_magenta", "color_yellow",
            "finish_opacity", "finish_shine", "finish_schiller",
        }

    def test_modifier_prefix_spans_finish_and_breath(self, catalog):
        path = PhenotypePath.parse("color.modifierPrefix", catalog)
        assert set(path.genes) == {
            "finish_opacity", "finish_shine", "finish_schiller",
            "breath_fire", "breath_ice", "breath_lightning",
        }

    @pytest.mark.parametrize(
        "text",
        [
            "color.hex",
            "traits.color_cyan.name",
            "traits.wing_spots.name",
            "traits.body_size.level",
            "breath_element.displayName",
            "",
        ],
    )
    def test_unknown_paths_rejected(self, catalog, text):
        with pytest.raises(UnknownPathError):
            PhenotypePath.parse(text, catalog)

    def test_unknown_path_is_a_genetics_error(self, catalog):
        with pytest.raises(GeneticsError):
            PhenotypePath.parse("finish.sparkle", catalog)


class TestValueOf:
    def test_reads_fields(self, resolver, make_genotype, catalog):
        phenotype = resolver.resolve(
            make_genotype(
                body_size=(6, 6),
                breath_fire=(3, 3), breath_ice=(0, 0), breath_lightning=(0, 0),
            )
        )
        assert PhenotypePath.parse("traits.body_size.name", catalog).value_of(phenotype) == "Mega"
        assert PhenotypePath.parse("breathElement.name", catalog).value_of(phenotype) == "Fire"
        assert (
            PhenotypePath.parse("color.displayName", catalog).value_of(phenotype)
            == phenotype.color.display_name
        )

    def test_unset_optional_field_is_none(self, resolver, make_genotype, catalog):
        phenotype = resolver.resolve(make_genotype())
        assert PhenotypePath.parse("color.specialtyName", catalog).value_of(phenotype) is None
        assert PhenotypePath.parse("color.modifierPrefix", catalog).value_of(phenotype) is None


def test_all_paths(catalog):
    texts = [path.text for path in all_paths(catalog)]
    assert len(texts) == 14 + 8
    assert texts[0] == "traits.body_size.name"
    assert "breathElement.displayName" in texts
    assert "finish.name" in texts
