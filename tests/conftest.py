import asyncio
from pathlib import Path

import pytest

from unicode_gacha.config import GachaConfig
from unicode_gacha.data.local_source import LocalTextSource
from unicode_gacha.unicode import init_unicode_index

UNICODE_DATA = """\
0000;<control>;Cc;0;BN;;;;;N;NULL;;;;
0041;LATIN CAPITAL LETTER A;Lu;0;L;;;;;N;;;;0061;
0042;LATIN CAPITAL LETTER B;Lu;0;L;;;;;N;;;;0062;
00E9;LATIN SMALL LETTER E WITH ACUTE;Ll;0;L;0065 0301;;;;N;LATIN SMALL LETTER E ACUTE;;00C9;;00C9
this line is not a record
3400;<CJK Ideograph Extension A, First>;Lo;0;L;;;;;N;;;;;
3402;<CJK Ideograph Extension A, Last>;Lo;0;L;;;;;N;;;;;
4E00;<CJK Ideograph, First>;Lo;0;L;;;;;N;;;;;
4E02;<CJK Ideograph, Last>;Lo;0;L;;;;;N;;;;;
AC00;<Hangul Syllable, First>;Lo;0;L;;;;;N;;;;;
AC02;<Hangul Syllable, Last>;Lo;0;L;;;;;N;;;;;
D800;<Non Private Use High Surrogate, First>;Cs;0;L;;;;;N;;;;;
DB7F;<Non Private Use High Surrogate, Last>;Cs;0;L;;;;;N;;;;;
E000;<Private Use, First>;Co;0;L;;;;;N;;;;;
F8FF;<Private Use, Last>;Co;0;L;;;;;N;;;;;
1F600;GRINNING FACE;So;0;ON;;;;;N;;;;;
"""

BLOCKS = """\
# Blocks-15.1.0.txt
# Start Code..End Code; Block Name

0000..007F; Basic Latin
0080..00FF; Latin-1 Supplement
3400..4DBF; CJK Unified Ideographs Extension A
4E00..9FFF; CJK Unified Ideographs
AC00..D7AF; Hangul Syllables
not a block
"""

CJK_READINGS = """\
# Unihan_Readings.txt
U+4E00\tkMandarin\tyī
U+4E00\tkHangul\t일:0N
U+4E01\tkMandarin\tdīng
U+ZZZZ\tkMandarin\tbroken
"""


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    (tmp_path / "Unihan").mkdir()
    (tmp_path / "UnicodeData.txt").write_text(UNICODE_DATA, encoding="utf-8")
    (tmp_path / "Blocks.txt").write_text(BLOCKS, encoding="utf-8")
    (tmp_path / "Unihan" / "Unihan_Readings.txt").write_text(CJK_READINGS, encoding="utf-8")
    return tmp_path


@pytest.fixture
def source(data_dir: Path) -> LocalTextSource:
    return LocalTextSource(data_dir)


@pytest.fixture
def index(source):
    return asyncio.run(init_unicode_index(source, config=GachaConfig()))
