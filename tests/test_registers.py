import pytest

from chip8.errors import StackOverflowError, StackUnderflowError
from chip8.registers import STACK_DEPTH, VF, Registers


def test_add_registers_all_values():
    reg = Registers()
    for v in range(256):
        for w in range(256):
            reg[0], reg[1] = v, w
            reg.add_registers(0, 1)
            assert reg[0] == (v + w) % 256
            assert reg[VF] == int(v + w > 255)


def test_sub_registers_all_values():
    reg = Registers()
    for v in range(256):
        for w in range(256):
            reg[2], reg[3] = v, w
            reg.sub_registers(2, 3)
            assert reg[2] == (v - w) % 256
            assert reg[VF] == int(v > w)


@pytest.mark.parametrize("v, w, flag", [(200, 100, 1), (10, 20, 0), (255, 1, 1)])
def test_add_into_vf_keeps_flag(v, w, flag):
    reg = Registers()
    reg[VF], reg[1] = v, w
    reg.add_registers(VF, 1)
    assert reg[VF] == flag


@pytest.mark.parametrize("v, w, flag", [(5, 3, 1), (3, 5, 0), (4, 4, 0)])
def test_sub_into_vf_keeps_flag(v, w, flag):
    reg = Registers()
    reg[VF], reg[1] = v, w
    reg.sub_registers(VF, 1)
    assert reg[VF] == flag


@pytest.mark.parametrize("v, w, flag", [(3, 10, 1), (10, 3, 0), (6, 6, 0)])
def test_subn_into_vf_keeps_flag(v, w, flag):
    reg = Registers()
    reg[VF], reg[1] = v, w
    reg.subn_registers(VF, 1)
    assert reg[VF] == flag


@pytest.mark.parametrize("value, flag", [(0x03, 1), (0x02, 0), (0xFF, 1), (0x00, 0)])
def test_shift_right_vf_keeps_flag(value, flag):
    reg = Registers()
    reg[VF] = value
    reg.shift_right(VF)
    assert reg[VF] == flag


@pytest.mark.parametrize("value, flag", [(0x81, 1), (0x40, 0), (0xFF, 1), (0x00, 0)])
def test_shift_left_vf_keeps_flag(value, flag):
    reg = Registers()
    reg[VF] = value
    reg.shift_left(VF)
    assert reg[VF] == flag


def test_add_flag_uses_operands_before_write():
    reg = Registers()
    reg[1], reg[VF] = 0x80, 0x80
    reg.add_registers(1, VF)
    assert reg[1] == 0x00
    assert reg[VF] == 1


def test_subn():
    reg = Registers()
    reg[0], reg[1] = 3, 10
    reg.subn_registers(0, 1)
    assert (reg[0], reg[1], reg[VF]) == (7, 10, 1)


@pytest.mark.parametrize("prior_vf", [0, 1, 0xAA])
def test_shift_right_flag_independent_of_prior_vf(prior_vf):
    reg = Registers()
    for value in range(256):
        reg[4], reg[VF] = value, prior_vf
        reg.shift_right(4)
        assert reg[4] == value >> 1
        assert reg[VF] == value & 1


@pytest.mark.parametrize("prior_vf", [0, 1, 0xAA])
def test_shift_left_flag_independent_of_prior_vf(prior_vf):
    reg = Registers()
    for value in range(256):
        reg[4], reg[VF] = value, prior_vf
        reg.shift_left(4)
        assert reg[4] == (value << 1) & 0xFF
        assert reg[VF] == value >> 7


def test_add_immediate_wraps_without_flag():
    reg = Registers()
    reg[2], reg[VF] = 0xFF, 7
    reg.add_immediate(2, 2)
    assert reg[2] == 1
    assert reg[VF] == 7


def test_call_and_ret():
    reg = Registers()
    reg.pc = 0x202
    reg.call(0x400)
    assert reg.pc == 0x400
    assert reg.sp == 1
    reg.ret()
    assert reg.pc == 0x202
    assert reg.sp == 0


def test_stack_overflow():
    reg = Registers()
    for _ in range(STACK_DEPTH):
        reg.call(0x300)
    with pytest.raises(StackOverflowError):
        reg.call(0x300)
    assert reg.sp == STACK_DEPTH


def test_stack_underflow():
    with pytest.raises(StackUnderflowError):
        Registers().ret()


def test_tick_timers_saturate():
    reg = Registers()
    reg.dt, reg.st = 2, 1
    reg.tick_timers()
    assert (reg.dt, reg.st) == (1, 0)
    reg.tick_timers()
    reg.tick_timers()
    assert (reg.dt, reg.st) == (0, 0)


def test_set_sprite_address_uses_low_nibble():
    reg = Registers()
    reg.set_sprite_address(0xA)
    assert reg.i == 50
    reg.set_sprite_address(0x1F)
    assert reg.i == 75


def test_invalid_register_index():
    with pytest.raises(IndexError):
        Registers()[16]
