"""Property tests over the full 64-bit input range."""

import re

from hypothesis import given
from hypothesis import strategies as st

from compound_duration import U64_MAX, format_dhms, format_ns, format_wdhms
from compound_duration.ladder import DHMS, DHMS_NS, WDHMS

TERM = re.compile(r"(\d+)(\D+)")

FORMATTERS = [
    (format_dhms, DHMS),
    (format_wdhms, WDHMS),
    (format_ns, DHMS_NS),
]

u64 = st.integers(min_value=0, max_value=U64_MAX)


def _parse(rendered, ladder):
    sizes = {unit.label: unit.size for unit in ladder.units}
    return [(int(count), label, sizes[label]) for count, label in TERM.findall(rendered)]


@given(u64)
def test_rendering_reconstructs_value(value):
    for fmt, ladder in FORMATTERS:
        terms = _parse(fmt(value), ladder)
        assert sum(count * size for count, _, size in terms) == value


@given(u64)
def test_labels_descend_without_zero_counts(value):
    for fmt, ladder in FORMATTERS:
        rendered = fmt(value)
        terms = _parse(rendered, ladder)
        labels = [label for _, label, _ in terms]
        sizes = [size for _, _, size in terms]

        assert "".join(f"{c}{l}" for c, l, _ in terms) == rendered
        assert len(set(labels)) == len(labels)
        assert sizes == sorted(sizes, reverse=True)
        if value:
            assert all(count > 0 for count, _, _ in terms)
        else:
            assert rendered == ladder.zero


@given(u64)
def test_lower_units_stay_within_bucket(value):
    for fmt, ladder in FORMATTERS:
        terms = _parse(fmt(value), ladder)
        bounds = {
            smaller.label: larger.size // smaller.size
            for larger, smaller in zip(ladder.units, ladder.units[1:])
        }
        for count, label, _ in terms:
            if label in bounds:
                assert count < bounds[label]


@given(st.integers(min_value=0, max_value=U64_MAX), st.integers(1, 4))
def test_wider_values_wrap_to_low_bits(value, high):
    wide = (high << 64) | value
    assert format_dhms(wide) == format_dhms(value)
    assert format_ns(wide) == format_ns(value)
