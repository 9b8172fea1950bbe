from unicode_gacha.gacha import format_code_label
from unicode_gacha.models import BlockRecord, CJKReading
from unicode_gacha.unicode import UnicodeIndex
from unicode_gacha.unicode.parser import parse_code_point


def test_get_block_without_blocks_returns_none():
    assert UnicodeIndex().get_block(0x41) is None


def test_get_block_includes_both_ends(index):
    assert index.get_block(0x0000).name == "Basic Latin"
    assert index.get_block(0x007F).name == "Basic Latin"
    assert index.get_block(0x0080).name == "Latin-1 Supplement"
    assert index.get_block(0xD7AF).name == "Hangul Syllables"


def test_get_block_outside_all_ranges(index):
    assert index.get_block(0x2000) is None


def test_get_code_point_miss_returns_none(index):
    assert index.get_code_point(0x2603) is None


def test_get_cjk_reading_returns_copy(index):
    readings = index.get_cjk_reading(0x4E00)
    readings.clear()
    assert len(index.get_cjk_reading(0x4E00)) == 2


def test_get_card_data_unknown_id(index):
    assert index.get_card_data(0x2603) is None


def test_get_card_data_without_readings(index):
    card = index.get_card_data(0x41)
    assert card.name == "LATIN CAPITAL LETTER A"
    assert card.char == "A"
    assert card.description == "Name: LATIN CAPITAL LETTER A\nBlock: Basic Latin"
    assert card.block_name == "Basic Latin"
    assert card.block_color == index.get_block(0x41).color
    assert card.label == "U+0041"


def test_get_card_data_with_readings(index):
    card = index.get_card_data(0x4E00)
    assert card.char == "一"
    assert card.description.splitlines() == [
        "Name: CJK IDEOGRAPH 4E00",
        "Block: CJK Unified Ideographs",
        "Mandarin: yī",
        "Hangul: 일:0N",
    ]


def test_get_card_data_without_block():
    index = UnicodeIndex()
    index.add_code_point(parse_code_point("2603;SNOWMAN;So;0;ON;;;;;N;;;;;"))
    card = index.get_card_data(0x2603)
    assert card.description == "Name: SNOWMAN\nBlock: Unknown"
    assert card.block_name == ""
    assert card.block_color == "#ffffff"


def test_iter_code_points_sorted_within_bounds():
    index = UnicodeIndex()
    for line in ["0042;B;Lu;0;L;;;;;N;;;;;", "0041;A;Lu;0;L;;;;;N;;;;;", "0100;X;Lu;0;L;;;;;N;;;;;"]:
        index.add_code_point(parse_code_point(line))
    assert [r.id for r in index.iter_code_points(0, 0xFF)] == [0x41, 0x42]


def test_manual_population():
    index = UnicodeIndex()
    index.set_blocks([BlockRecord(id=0, start=0x10, end=0x20, name="Test", color="#123456")])
    index.add_cjk_reading(0x10, CJKReading("kDefinition", "ten"))
    assert index.get_block(0x20).color == "#123456"
    assert index.get_cjk_reading(0x10)[0].label == "Definition"


def test_format_code_label():
    assert format_code_label(0x41) == "U+0041"
    assert format_code_label(0x1F600) == "U+1F600"
