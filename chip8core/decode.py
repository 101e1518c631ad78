"""CHIP-8 instruction decoding."""

from chex import dataclass


@dataclass(frozen=True)
class DecodedInstruction:
    """Instruction word split into its nibble fields and operand forms."""
    raw: int
    opcode: int  # First nibble
    x: int       # Second nibble (VX register)
    y: int       # Third nibble (VY register)
    n: int       # Fourth nibble (4-bit immediate)
    nn: int      # Last byte (8-bit immediate)
    nnn: int     # Last 12 bits (12-bit address)


def decode(instruction: int) -> DecodedInstruction:
    """Decode 16-bit instruction into components."""
    instruction = int(instruction) & 0xFFFF
    return DecodedInstruction(
        raw=instruction,
        opcode=(instruction & 0xF000) >> 12,
        x=(instruction & 0x0F00) >> 8,
        y=(instruction & 0x00F0) >> 4,
        n=instruction & 0x000F,
        nn=instruction & 0x00FF,
        nnn=instruction & 0x0FFF
    )


_ALU_MNEMONICS = {
    0x0: "LD V{x:X}, V{y:X}",
    0x1: "OR V{x:X}, V{y:X}",
    0x2: "AND V{x:X}, V{y:X}",
    0x3: "XOR V{x:X}, V{y:X}",
    0x4: "ADD V{x:X}, V{y:X}",
    0x5: "SUB V{x:X}, V{y:X}",
    0x6: "SHR V{x:X}",
    0x7: "SUBN V{x:X}, V{y:X}",
    0xE: "SHL V{x:X}",
}

_MISC_MNEMONICS = {
    0x07: "LD V{x:X}, DT",
    0x0A: "LD V{x:X}, K",
    0x15: "LD DT, V{x:X}",
    0x18: "LD ST, V{x:X}",
    0x1E: "ADD I, V{x:X}",
    0x29: "LD F, V{x:X}",
    0x33: "LD B, V{x:X}",
    0x55: "LD [I], V{x:X}",
    0x65: "LD V{x:X}, [I]",
}


def disassemble(instruction: int) -> str:
    """Render an instruction word as Cowgod-style assembly.

    Unknown words come back as ``DW 0xNNNN``.
    """
    d = decode(instruction)
    fields = dict(x=d.x, y=d.y, n=d.n, nn=d.nn, nnn=d.nnn)

    if d.raw == 0x00E0:
        return "CLS"
    if d.raw == 0x00EE:
        return "RET"

    template = None
    if d.opcode == 0x0:
        template = "SYS 0x{nnn:03X}"
    elif d.opcode == 0x1:
        template = "JP 0x{nnn:03X}"
    elif d.opcode == 0x2:
        template = "CALL 0x{nnn:03X}"
    elif d.opcode == 0x3:
        template = "SE V{x:X}, 0x{nn:02X}"
    elif d.opcode == 0x4:
        template = "SNE V{x:X}, 0x{nn:02X}"
    elif d.opcode == 0x5 and d.n == 0:
        template = "SE V{x:X}, V{y:X}"
    elif d.opcode == 0x6:
        template = "LD V{x:X}, 0x{nn:02X}"
    elif d.opcode == 0x7:
        template = "ADD V{x:X}, 0x{nn:02X}"
    elif d.opcode == 0x8:
        template = _ALU_MNEMONICS.get(d.n)
    elif d.opcode == 0x9 and d.n == 0:
        template = "SNE V{x:X}, V{y:X}"
    elif d.opcode == 0xA:
        template = "LD I, 0x{nnn:03X}"
    elif d.opcode == 0xB:
        template = "JP V0, 0x{nnn:03X}"
    elif d.opcode == 0xC:
        template = "RND V{x:X}, 0x{nn:02X}"
    elif d.opcode == 0xD:
        template = "DRW V{x:X}, V{y:X}, {n}"
    elif d.opcode == 0xE:
        template = {0x9E: "SKP V{x:X}", 0xA1: "SKNP V{x:X}"}.get(d.nn)
    elif d.opcode == 0xF:
        template = _MISC_MNEMONICS.get(d.nn)

    if template is None:
        return f"DW 0x{d.raw:04X}"
    return template.format(**fields)
