"""Tests for test-type normalization and family metadata."""

import pytest

from pysamplesize.samplesize import TEST_TYPES, TestFamily, is_paired_design, normalize_test_type


class TestNormalizeTestType:

    @pytest.mark.parametrize("name,family", [
        ("two-sample t-test", TestFamily.TWO_SAMPLE),
        ("independent t-test", TestFamily.TWO_SAMPLE),
        ("paired t-test", TestFamily.PAIRED),
        ("dependent t-test", TestFamily.PAIRED),
        ("one-way anova", TestFamily.ANOVA),
        ("proportion test", TestFamily.PROPORTION),
        ("chi-square test", TestFamily.PROPORTION),
        ("correlation test", TestFamily.CORRELATION),
    ])
    def test_aliases(self, name, family):
        assert normalize_test_type(name) is family

    def test_case_folded(self):
        assert normalize_test_type("Chi-Square Test") is TestFamily.PROPORTION
        assert normalize_test_type("ONE-WAY ANOVA") is TestFamily.ANOVA

    @pytest.mark.parametrize("name", ["regression", "", "t-test", " paired t-test"])
    def test_unknown_is_default(self, name):
        assert normalize_test_type(name) is TestFamily.DEFAULT

    def test_vocabulary(self):
        assert len(TEST_TYPES) == 8
        assert all(normalize_test_type(t) is not TestFamily.DEFAULT for t in TEST_TYPES)


class TestIsPairedDesign:

    def test_paired(self):
        assert is_paired_design("Paired t-test")
        assert is_paired_design("unpaired comparison")

    def test_not_paired(self):
        assert not is_paired_design("dependent t-test")
        assert not is_paired_design("two-sample t-test")


class TestFamilyMetadata:

    def test_every_family_has_formula_and_assumptions(self):
        for family in TestFamily:
            assert family.formula.startswith("n = ")
            assert len(family.assumptions) >= 3
            assert family.label

    def test_default_shares_two_sample_formula(self):
        assert TestFamily.DEFAULT.formula == TestFamily.TWO_SAMPLE.formula
        assert TestFamily.DEFAULT.assumptions == TestFamily.TWO_SAMPLE.assumptions[:3]
