import operator


def _add(a, b):
    total = a + b
    return total & 0xFF, int(total > 0xFF)


def _sub(a, b):
    return (a - b) & 0xFF, int(a > b)


def _subn(a, b):
    return (b - a) & 0xFF, int(b > a)


def _shr(a, _b):
    return a >> 1, a & 0x1


def _shl(a, _b):
    return (a << 1) & 0xFF, (a >> 7) & 0x1


def _bitwise(fn):
    return lambda a, b: (fn(a, b), None)


class ALU:
    """8-bit operations of the 8xyN family.

    Each op returns ``(result, flag)``; ``flag`` is the new VF value or
    ``None`` when the op leaves VF alone.
    """
    OPS = {
        "LD":   lambda a, b: (b, None),
        "OR":   _bitwise(operator.or_),
        "AND":  _bitwise(operator.and_),
        "XOR":  _bitwise(operator.xor),
        "ADD":  _add,
        "SUB":  _sub,
        "SHR":  _shr,
        "SUBN": _subn,
        "SHL":  _shl,
    }

    @classmethod
    def execute(cls, op: str, a: int, b: int):
        try:
            return cls.OPS[op](a & 0xFF, b & 0xFF)
        except KeyError as e:
            raise ValueError(f"Unsupported ALU op {op}") from e
