"""Property-based tests for result file naming (core/naming.py).

Uses Hypothesis to verify correctness properties across arbitrary inputs.
"""

import re

from hypothesis import given, settings
from hypothesis import strategies as st

from core.naming import generate_result_filename, parse_result_filename

# Strategies: realistic filename characters (letters, numbers, punctuation,
# symbols, spaces) without control chars, newlines or OS-forbidden characters.
_filename_chars = st.characters(
    whitelist_categories=("L", "N", "P", "S", "Zs"),
    blacklist_characters='<>:"/\\|?*',
)
valid_base_names = st.text(_filename_chars, min_size=1).filter(lambda s: s.strip() != "")
any_base_names = st.text(st.characters(blacklist_categories=("Cc", "Cs")), max_size=40)

RESULT_FILENAME_RE = re.compile(r"^.+_\d{8}_\d{6}\.png$")


# Property 1: generated names always follow {base}_{YYYYMMDD_HHmmss}.png
@given(base_name=any_base_names)
@settings(max_examples=200)
def test_result_filename_format(base_name):
    name = generate_result_filename(base_name)
    assert RESULT_FILENAME_RE.match(name)
    for ch in '<>:"/\\|?*':
        assert ch not in name


# Property 2: parsing a generated name recovers the (stripped) base name
@given(base_name=valid_base_names)
@settings(max_examples=200)
def test_generate_then_parse_recovers_base(base_name):
    name = generate_result_filename(base_name)
    parsed = parse_result_filename(name)
    assert parsed is not None
    assert parsed["base_name"] == base_name.strip()
    assert parsed["extension"] == ".png"
