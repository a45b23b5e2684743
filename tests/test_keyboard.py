from chip8.keyboard import KEY_LAYOUT, Keypad, key_for_char, key_for_code


def test_layout_covers_all_keys():
    assert sorted(KEY_LAYOUT.values()) == list(range(16))


def test_key_for_char():
    assert key_for_char("1") == 0x1
    assert key_for_char("v") == 0xF
    assert key_for_char("X") == 0x0
    assert key_for_char("p") is None
    assert key_for_char("") is None


def test_press_release():
    pad = Keypad()
    assert pad.first_pressed() is None
    pad.press(0xB)
    pad.press(0x3)
    assert pad.is_pressed(0xB)
    assert pad.first_pressed() == 0x3
    pad.release(0x3)
    assert pad.first_pressed() == 0xB
    pad.clear()
    assert not pad.is_pressed(0xB)


def test_out_of_range_key_is_never_pressed():
    pad = Keypad()
    pad.press(0x0)
    assert not pad.is_pressed(0x10)
    assert not pad.is_pressed(-1)


def test_key_for_code_ignores_modifiers_and_case():
    assert key_for_code(ord("Q")) == 0x4
    assert key_for_code(ord("4")) == 0xC
    assert key_for_code(ord("V")) == 0xF


def test_key_for_code_unmapped():
    assert key_for_code(ord("P")) is None
    assert key_for_code(0x20) is None          # space
    assert key_for_code(0x01000000) is None    # Qt.Key_Escape
