import pytest
from domain.comparison.consensus import (
    DegenerateCoefficientsError, classify, classify_coefficients, informative_pairs
)
from domain.geometry.surface import Surface, Plane
from domain.geometry.tolerance import Classification, FixedEpsilon, RelativeEpsilon

STRATEGIES = [FixedEpsilon(), RelativeEpsilon()]


class TestClassifyCoefficients:
    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_unanimous_same(self, strategy):
        assert classify_coefficients([1.0, 2.0, 3.0], [1.0, 2.0, 3.0], strategy) == Classification.SAME

    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_unanimous_opposite(self, strategy):
        assert classify_coefficients([1.0, -2.0], [-1.0, 2.0], strategy) == Classification.OPPOSITE

    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_disagreement_is_different(self, strategy):
        assert classify_coefficients([1.0, 2.0], [1.0, -2.0], strategy) == Classification.DIFFERENT
        assert classify_coefficients([1.0, 2.0], [1.0, 5.0], strategy) == Classification.DIFFERENT

    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_zero_pairs_are_skipped(self, strategy):
        assert classify_coefficients([0.0, 1.0, 0.0], [0.0, -1.0, 0.0], strategy) == Classification.OPPOSITE
        assert classify_coefficients([0.0, 0.0, 2.0], [0.0, 0.0, 2.0], strategy) == Classification.SAME

    def test_one_sided_zero_is_informative(self):
        strategy = RelativeEpsilon()
        assert classify_coefficients([0.0, 1.0], [1.0, 1.0], strategy) == Classification.DIFFERENT

    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_degenerate(self, strategy):
        with pytest.raises(DegenerateCoefficientsError):
            classify_coefficients([0.0, 0.0], [0.0, -0.0], strategy)
        with pytest.raises(DegenerateCoefficientsError):
            classify_coefficients([], [], strategy)

    def test_degenerate_is_value_error(self):
        with pytest.raises(ValueError, match="No informative coefficients"):
            classify_coefficients([0.0], [0.0], FixedEpsilon())

    def test_length_mismatch(self):
        with pytest.raises(ValueError):
            classify_coefficients([1.0, 2.0], [1.0], FixedEpsilon())

    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_scale_applied_to_left(self, strategy):
        assert classify_coefficients([1.0, 2.0], [3.0, 6.0], strategy, scale=3.0) == Classification.SAME
        assert classify_coefficients([1.0, 2.0], [-3.0, -6.0], strategy, scale=3.0) == Classification.OPPOSITE

    def test_zero_pairs_filtered_before_scaling(self):
        # Both positions survive the raw filter although their scaled values are zero
        assert classify_coefficients([1.0, 2.0], [0.0, 0.0], FixedEpsilon(), scale=0.0) == Classification.SAME

    def test_informative_pairs(self):
        assert informative_pairs([0.0, 1.0, 0.0], [0.0, 0.0, 2.0]) == [(1.0, 0.0), (0.0, 2.0)]
        with pytest.raises(DegenerateCoefficientsError):
            informative_pairs([0.0], [-0.0])

    @pytest.mark.parametrize("factor", [1e-8, -2.0, 3.5, 1e10])
    def test_dynamic_scale_invariance(self, factor):
        strategy = RelativeEpsilon()
        cases = [
            ([1.0, 2.0, 0.0], [1.0, 2.0, 0.0]),
            ([1.0, 2.0, 0.0], [-1.0, -2.0, 0.0]),
            ([1.0, 2.0, 3.0], [1.0, 2.0, 4.0]),
        ]
        for left, right in cases:
            scaled_left = [factor * value for value in left]
            scaled_right = [factor * value for value in right]
            assert (classify_coefficients(scaled_left, scaled_right, strategy)
                    == classify_coefficients(left, right, strategy))

    def test_fixed_is_not_scale_invariant(self):
        strategy = FixedEpsilon()
        assert classify_coefficients([1e-13], [2e-13], strategy) == Classification.SAME
        assert classify_coefficients([1e-7], [2e-7], strategy) == Classification.DIFFERENT


class TestClassify:
    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_identical_copies_are_same(self, strategy):
        s1 = Surface(id=1, kind="quadric", coefficients=[1.0, -0.5, 0.0, 3.25, 7.0])
        s2 = Surface(id=2, kind="quadric", coefficients=[1.0, -0.5, 0.0, 3.25, 7.0])
        p1 = Plane(id=3, coefficients=[0.1, 0.7, -0.3, 12.0])
        p2 = Plane(id=4, coefficients=[0.1, 0.7, -0.3, 12.0])
        assert classify(s1, s2, strategy) == Classification.SAME
        assert classify(p1, p2, strategy) == Classification.SAME

    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_negated_copies_are_opposite(self, strategy):
        s = Surface(id=1, kind="quadric", coefficients=[1.0, -0.5, 0.0, 3.25, 7.0])
        p = Plane(id=3, coefficients=[0.1, 0.7, -0.3, 12.0])
        assert classify(s, s.negated(), strategy) == Classification.OPPOSITE
        assert classify(p, p.negated(), strategy) == Classification.OPPOSITE

    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_kind_mismatch_short_circuits(self, strategy):
        # All-zero coefficients would be degenerate if they were inspected
        s1 = Surface(id=1, kind="sphere", coefficients=[0.0, 0.0])
        s2 = Surface(id=2, kind="cone", coefficients=[0.0, 0.0])
        assert classify(s1, s2, strategy) == Classification.DIFFERENT

    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_length_mismatch_is_different(self, strategy):
        s1 = Surface(id=1, kind="sphere", coefficients=[1.0, 2.0])
        s2 = Surface(id=2, kind="sphere", coefficients=[1.0, 2.0, 0.0])
        assert classify(s1, s2, strategy) == Classification.DIFFERENT

    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_degenerate_surfaces(self, strategy):
        s1 = Surface(id=1, kind="sphere", coefficients=[0.0, 0.0])
        s2 = Surface(id=2, kind="sphere", coefficients=[0.0, 0.0])
        with pytest.raises(DegenerateCoefficientsError):
            classify(s1, s2, strategy)

    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_scaled_planes_are_same(self, strategy):
        p1 = Plane(id=1, coefficients=[1.0, 2.0, 3.0, 4.0])
        p2 = Plane(id=2, coefficients=[2.0, 4.0, 6.0, 8.0])
        assert classify(p1, p2, strategy) == Classification.SAME

    @pytest.mark.parametrize("factor", [3.0, 1e-3, 250.0, 0.5])
    def test_plane_scale_invariance(self, factor):
        p = Plane(id=1, coefficients=[0.3, -1.7, 2.9, 5.1])
        assert classify(p, p.scaled(factor), RelativeEpsilon()) == Classification.SAME
        assert classify(p, p.scaled(-factor), RelativeEpsilon()) == Classification.OPPOSITE

    def test_plane_with_different_normal(self):
        p1 = Plane(id=1, coefficients=[1.0, 0.0, 0.0, 4.0])
        p2 = Plane(id=2, coefficients=[0.0, 1.0, 0.0, 4.0])
        assert classify(p1, p2, RelativeEpsilon()) == Classification.DIFFERENT

    def test_surfaces_are_not_scale_aligned(self):
        s1 = Surface(id=1, kind="sphere", coefficients=[1.0, 2.0, 3.0])
        s2 = Surface(id=2, kind="sphere", coefficients=[2.0, 4.0, 6.0])
        assert classify(s1, s2, RelativeEpsilon()) == Classification.DIFFERENT

    def test_underflowing_plane_coefficient_stays_informative(self):
        # The scale ratio is 1e-300, so 1e-300 on the left underflows to 0.0;
        # its position still counts because the raw pair is not (0, 0)
        p1 = Plane(id=1, coefficients=[1e-300, 0.0, 0.0, 1.0])
        p2 = Plane(id=2, coefficients=[0.0, 0.0, 0.0, -1e-300])
        assert classify(p1, p2, RelativeEpsilon()) == Classification.DIFFERENT

    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_all_zero_plane_is_degenerate(self, strategy):
        zero = Plane(id=1, coefficients=[0.0, 0.0, 0.0, 0.0])
        p = Plane(id=2, coefficients=[1.0, 2.0, 3.0, 4.0])
        with pytest.raises(DegenerateCoefficientsError):
            classify(zero, p, strategy)
        with pytest.raises(DegenerateCoefficientsError):
            classify(p, zero, strategy)
