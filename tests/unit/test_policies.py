"""
Unit tests for interpolation policy and border mode resolution.
"""
import pytest

from pyrefscale.exceptions import UnsupportedPolicyError
from pyrefscale.rastermanip import (
    BorderMode, InterpolationPolicy, resolve_border_mode, resolve_policy
)


class TestResolvePolicy:

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("nearest", InterpolationPolicy.NEAREST_NEIGHBOR),
            ("nearest_neighbor", InterpolationPolicy.NEAREST_NEIGHBOR),
            ("Bilinear", InterpolationPolicy.BILINEAR),
            (" area ", InterpolationPolicy.AREA),
        ],
    )
    def test_names(self, name, expected):
        assert resolve_policy(name) is expected

    @pytest.mark.unit
    def test_members_and_values(self):
        assert resolve_policy(InterpolationPolicy.AREA) is InterpolationPolicy.AREA
        assert resolve_policy(1) is InterpolationPolicy.BILINEAR

    @pytest.mark.unit
    @pytest.mark.parametrize("bad", ["cubic", "", 3, -1, True, 1.5, None])
    def test_rejected(self, bad):
        with pytest.raises(UnsupportedPolicyError):
            resolve_policy(bad)


class TestResolveBorderMode:

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("constant", BorderMode.CONSTANT),
            ("REPLICATE", BorderMode.REPLICATE),
            ("undefined", BorderMode.UNDEFINED),
        ],
    )
    def test_names(self, name, expected):
        assert resolve_border_mode(name) is expected

    @pytest.mark.unit
    def test_members_and_values(self):
        assert resolve_border_mode(BorderMode.REPLICATE) is BorderMode.REPLICATE
        assert resolve_border_mode(2) is BorderMode.UNDEFINED

    @pytest.mark.unit
    @pytest.mark.parametrize("bad", ["wrap", "reflect", 5, False])
    def test_rejected(self, bad):
        with pytest.raises(UnsupportedPolicyError):
            resolve_border_mode(bad)
