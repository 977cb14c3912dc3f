"""Score digits 5 to 9, each a 14x14 image, and lookup of a digit by character."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from functools import lru_cache

from pixelinvaders.numerals_low import (
    DIGIT_SIZE,
    get_four,
    get_one,
    get_three,
    get_two,
    get_zero,
)
from pixelinvaders.sprites import Drawing


def _digit(rows: Sequence[Sequence[int]]) -> Drawing:
    """Build a square digit drawing from its pixel rows."""
    if len(rows) != DIGIT_SIZE or any(len(row) != DIGIT_SIZE for row in rows):
        raise ValueError(f"a digit must be {DIGIT_SIZE}x{DIGIT_SIZE} pixels")
    pixels = tuple(pixel for row in rows for pixel in row)
    return Drawing(width=DIGIT_SIZE, height=DIGIT_SIZE, pixels=pixels)


_FILL = 9073478

_FIVE_ROWS = (
    (10590074, 15457200) + (15325356,) * 10 + (15589300, 7234894),
    (12627588, 13876357, 14073995, 11309402, 13283188, 13217395, 13282932,
     13283188, 13283188, 13348982, 13547395, 11769952, 14535063, 10521438),
    (12627588, 13876357, 11574126, 8085808, 13283188, 13217651, 13283188,
     13283188, 13217651, 13086067, 10521439, 9270080, 14535063, 10521438),
    (12627588, 13876357, 11309402, 11375195, 13217395, 13217395, 13283188,
     13283188, 13217395, 13085809, 11046231, 11835745, 14535063, 10521438),
    (12627588, 13876357, 13283187, 13282931, 13217395, 14139532)
    + (15325613,) * 6 + (15654837, 10521438),
    (12627588, 13876357, 13348982, 13085809, 13283188, 13349239, 13481083,
     13481083, 13481083, 13546619, 13546876, 13349497, 14666907, 10521438),
    (12627588, 13876357, 14206876, 8085808, 13282931, 13283188, 13282931,
     13283188, 13283188, 13349240, 12890760, 9270080, 14535063, 10521438),
    (12627588, 14534806, 10257752, 10455130, 14073738, 14073738, 14073738,
     13481082, 13217395, 12888431, 8941115, 10454351, 14535063, 10521438),
    (12627588, 15062181) + (14798494,) * 5
    + (13744257, 13282931, 13282932, 13217395, 13217652, 14535063, 10521438),
    (12627588, 13876357, 13283188, 13283187, 13217652, 13217651, 13283188,
     13283188, 13283188, 13283188, 13217395, 13810050, 15325613, 10521438),
    (12627588, 13876357, 14798495, 9664837, 13283188, 13217651, 13283188,
     13283188, 13283188, 13283188, 13678463, 15391663, 12956810, 8152118),
    (10524281, 13876357, 9139011, 8085808, 13217651, 13217652, 13283187,
     13217395, 13217395, 13415033, 15589043, 13417361, 7888945, 3483665),
    (9077612, 14865580, 14799786, 14799786) + (15062701,) * 6
    + (13483154, 7099431, 3418129, 131329),
    (2236443, 7758911) + (_FILL,) * 9 + (7101500, 3486250, 1381392),
)

_SIX_ROWS = (
    (12366224, 15391406) + (15325356,) * 10 + (15720630, 5392951),
    (13746583, 13612413, 13745031, 11572830, 13283188, 13283187, 13217652,
     13283188, 13283188, 13217652, 13612669, 12691828, 14009237, 9402443),
    (13746583, 13546876, 10850404, 8875066, 13283188, 13217652, 13283188,
     13283188, 13217652, 13217651, 12626034, 9402443, 12496001, 9402443),
    (13746583, 13546620, 11046231, 11638623, 13283188, 13217651, 13283187,
     13283188, 13283188, 13283187, 12493674, 11046231, 14009237, 9402443),
    (13746583, 13546876, 13217395, 13283187, 14139531)
    + (15325613,) * 7 + (15720887, 9402443),
    (13746583, 13546876, 13283188, 13217651, 13349238)
    + (13481083,) * 5 + (13546876, 13480827, 14930338, 9402443),
    (13746583, 13546876, 13217396, 13283188, 13283188, 13217651, 13217395,
     13283188, 13283188, 13217652, 13678980, 10982247, 12496001, 9402443),
    (13746583, 13546876, 13217652, 13217651, 13612413, 14073738, 14073738,
     14073738, 14007944, 13217395, 11769952, 8941115, 13219723, 9402443),
    (13746583, 13546876, 13282931, 13283188, 14337426, 15984061, 15984318,
     15984318, 15720888, 13283188, 13283188, 13217395, 14864545, 9402443),
    (13746583, 13546876, 13217652, 13283188, 13744257, 14403476, 14403476,
     14403476, 14337425, 13283187, 13217651, 13217651, 14864545, 9402443),
    (13746583, 13612669, 14206615, 10191180, 13217395, 13283188, 13283188,
     13283188, 13283188, 13283187, 13876357, 12231796, 13219723, 9402443),
    (12300432, 13481083, 8415290, 8875066, 13283188, 13217652, 13217395,
     13217652, 13217395, 13217395, 11704417, 7954481, 12496001, 9402443),
    (10985090, 14997165, 14799529, 14865322) + (15062701,) * 6
    + (14931371, 14799529, 14997165, 9205064),
    (2631199, 8416066) + (_FILL,) * 11 + (6508070,),
)

_SEVEN_ROWS = (
    (14207911,) + (15325356,) * 11 + (15786681, 3616801),
    (14799786, 13414775, 13350015, 11901538, 13217396, 13282931, 13283188,
     13283188, 13217652, 13283187, 13744257, 12296813, 14601890, 8283704),
    (14799786, 13020275, 10323803, 9599044, 13217396, 13283188, 13217395,
     13283188, 13283188, 13217652, 12428658, 8875842, 13614741, 8283704),
    (14799786, 12954223, 11046231, 11967330, 13217651, 13217395, 13217395,
     13283187, 13282931, 13283187, 12230502, 11046231, 14667426, 8283704),
    (14865322,) + (15325613,) * 4
    + (13941894, 13283188, 13283187, 13217395, 13283188, 13283188,
       14534806, 15786681, 8283704),
    (2301717, 7823154, 10389852, 15918524, 14600856, 13348982, 13283188,
     13283188, 13283188, 13283188, 14469012, 15655095, 9995094, 7033125),
    (920325, 4473141, 15852474, 14600856, 13283188, 13283188, 13283187,
     13283187, 13348982, 14469013, 15260337, 10060631, 6179103, 788740),
    (5130295, 15852474, 14601113, 13217652, 13217395, 13283188, 13217395,
     13283445, 14469012, 15062958, 10389853, 5784605, 1314823, 0),
    (14865322, 14600600, 13282932, 13283188, 13283188, 13283188, 13282932,
     14469012, 15194544, 10455646, 5718556, 1643272, 0, 0),
    (14799786,) + (13283188,) * 5
    + (14469013, 15523509, 10192473, 5784349, 1643272, 0, 0, 0),
    (14799786, 13546619, 13482378, 10717523, 13217395, 14534806, 15786681,
     9995094, 6178335, 1446151, 0, 0, 0, 0),
    (14799786, 12625260, 8217911, 9599044, 14469012, 15786681, 10060887,
     6836003, 986117, 0, 0, 0, 0, 0),
    (13549979, 14996908, 14799529, 14865579, 15128494, 9994838, 6704674,
     657411, 0, 0, 0, 0, 0, 0),
    (3814697,) + (_FILL,) * 5
    + (4669488, 3486250, 3486249, 3486249, 3486250, 3486250, 3486250, 526086),
)

_EIGHT_ROWS = (
    (15852731,) + (15325356,) * 11 + (15852731, 3616801),
    (15589044, 13546619, 12955000, 12164709, 13283188, 13283188, 13283188,
     13217396, 13282931, 13217396, 13876100, 11836261, 15260079, 8283704),
    (15589044, 12757362, 9731665, 10388302, 13283188, 13217651, 13217396,
     13283188, 13283187, 13217652, 12231537, 8349240, 14733736, 8283704),
    (15589044, 12691052, 11046231, 12230502, 14403219, 14996131, 14996131,
     14996131, 14403219, 13283188, 11967330, 11046231, 15260079, 8283704),
    (15589044, 13283188, 13283187, 13283188, 15061925, 15918781, 15918525,
     15984318, 15061925, 13283188, 13283188, 13283188, 15589043, 8283704),
    (15589044, 13217395, 13217651, 13283188, 13415032, 13481083, 13481083,
     13481083, 13415032, 13217652, 13217395, 13217651, 15589043, 8283704),
    (15589044, 13283188, 13283187, 13283188, 13283187, 13283188, 13283188,
     13283188, 13283188, 13283188, 13282932, 13283187, 15589043, 8283704),
    (15589044, 13217652, 13283188, 13283188, 13810050, 14073738, 14073738,
     14073738, 13810306, 13283188, 13283188, 13217651, 15589043, 8283704),
    (15589044, 13283188, 13282932, 13217395, 15061925, 15984318, 15918526,
     15918782, 15061925, 13283187, 13283188, 13217395, 15589043, 8283704),
    (15589044, 13283188, 13283187, 13283188, 14007945, 14403476, 14403476,
     14403476, 14073737, 13283188, 13283188, 13217652, 15589043, 8283704),
    (15589044, 13744513, 12692604, 11243865, 13283188, 13283188, 13283188,
     13283188, 13283188, 13283188, 14337426, 10652505, 14996907, 8283704),
    (15589044, 12033381, 8020532, 10388302, 13283188, 13283188, 13283188,
     13283187, 13283188, 13217652, 10520404, 7559467, 14733736, 8283704),
    (14602668, 14996908, 14799529, 14931115) + (15062701,) * 6
    + (14865579, 14799529, 15128495, 8151862),
    (4209453,) + (_FILL,) * 4 + (6310692, 5587228, 6244900)
    + (_FILL,) * 5 + (5324574,),
)

_NINE_ROWS = (
    (15786681,) + (15325356,) * 11 + (14274216, 1314566),
    (15259562, 13678462, 12559985, 12493673, 13283188, 13283188, 13282931,
     13283187, 13283188, 13283188, 14007687, 11441246, 14865322, 5389595),
    (15259562, 12560242, 9205064, 11177816, 13283188, 13283188, 13283188,
     13283187, 13283188, 13283188, 11968625, 7757103, 14799529, 5389851),
    (15259562, 12362344, 11046231, 12493674, 14600857, 14996131, 14996131,
     14996131, 14205581, 13283188, 11638623, 11046231, 14865322, 5389850),
    (15259562, 13283188, 13283188, 13217395, 15391406, 15984318, 15984318,
     15984061, 14732700, 13283188, 13283187, 13217395, 14865322, 5389850),
    (15259562, 13217395, 13283187, 13283188, 13480825, 13481083, 13481083,
     13481083, 13414775, 13283188, 13217395, 13217395, 14865322, 5324315),
    (15259562, 13217396, 13283188, 13283187, 13282932, 13283188, 13217651,
     13283188, 13283188, 13283188, 13282931, 13283188, 14865322, 5389851),
    (15457456,) + (14073738,) * 7
    + (13678464, 13283188, 13282932, 13283188, 14865322, 5389851),
    (15654837,) + (14798494,) * 7
    + (14073995, 13283187, 13283188, 13283188, 14865322, 5389851),
    (15259562,) + (13283188,) * 4 + (13283187,) + (13283188,) * 6
    + (14865322, 5389851),
    (15259562, 14007688, 11902831, 11770208) + (13283188,) * 6
    + (14600856, 9928268, 14799529, 5389594),
    (15259562, 11441503, 7888688, 11177816, 13283188, 13217395, 13217651,
     13283188, 13283188, 13283187, 9928525, 7362087, 14799529, 5389850),
    (14602668, 14931115, 14799529, 14931371) + (15062701,) * 6
    + (14865322, 14799529, 14207135, 5389594),
    (4998193,) + (_FILL,) * 11 + (8678721, 4141077),
)


@lru_cache(maxsize=None)
def get_five() -> Drawing:
    """Return the digit 5."""
    return _digit(_FIVE_ROWS)


@lru_cache(maxsize=None)
def get_six() -> Drawing:
    """Return the digit 6."""
    return _digit(_SIX_ROWS)


@lru_cache(maxsize=None)
def get_seven() -> Drawing:
    """Return the digit 7."""
    return _digit(_SEVEN_ROWS)


@lru_cache(maxsize=None)
def get_eight() -> Drawing:
    """Return the digit 8."""
    return _digit(_EIGHT_ROWS)


@lru_cache(maxsize=None)
def get_nine() -> Drawing:
    """Return the digit 9."""
    return _digit(_NINE_ROWS)


_DIGITS: dict[str, Callable[[], Drawing]] = {
    "0": get_zero,
    "1": get_one,
    "2": get_two,
    "3": get_three,
    "4": get_four,
    "5": get_five,
    "6": get_six,
    "7": get_seven,
    "8": get_eight,
    "9": get_nine,
}


def get_number(n: str) -> Drawing:
    """Return the drawing for the digit character ``n``; anything else draws as 0."""
    return _DIGITS.get(n, get_zero)()