"""Parameterize a fixed TEAL program template by patching bytes in place.

A template is compiled TEAL whose constant blocks carry placeholder values.
Each placeholder is described by a `FieldDescriptor`; `inject` overwrites the
placeholders with caller values and `extract` reads them back out of a
finished program.
"""

import enum
import logging
from dataclasses import dataclass

from algosdk import constants, encoding

from splitescrow.errors import DecodingError, EncodingError, TemplateError

logger = logging.getLogger(__name__)

# a uint64 never needs more than ten 7-bit groups
MAX_UVARINT_LENGTH = 10
MAX_UINT64 = 2 ** 64 - 1

INTCBLOCK = 0x20
BYTECBLOCK = 0x26


class FieldKind(enum.Enum):
    UINT = "uint"
    ADDRESS = "address"


# bytes each kind of placeholder occupies in the template
PLACEHOLDER_WIDTHS = {
    FieldKind.UINT: 1,
    FieldKind.ADDRESS: constants.key_len_bytes,
}


@dataclass(frozen=True)
class FieldDescriptor:
    """A patchable placeholder at `offset` in the template."""

    name: str
    offset: int
    kind: FieldKind

    @property
    def width(self):
        return PLACEHOLDER_WIDTHS[self.kind]


def put_uvarint(value):
    """Return `value` as unsigned LEB128 bytes."""
    buf = bytearray()
    while value >= 0x80:
        buf.append((value & 0x7F) | 0x80)
        value >>= 7
    buf.append(value)
    return bytes(buf)


def read_uvarint(data, pos=0):
    """Decode an unsigned LEB128 integer at `pos`.

    Returns:
        tuple: the value and the position just past it
    """
    value = 0
    shift = 0
    for i in range(MAX_UVARINT_LENGTH):
        if pos + i >= len(data):
            raise DecodingError("truncated varint at offset {}".format(pos))
        byte = data[pos + i]
        value |= (byte & 0x7F) << shift
        if byte < 0x80:
            return value, pos + i + 1
        shift += 7
    raise DecodingError("varint at offset {} is too long".format(pos))


def validate_fields(template, fields):
    """Fail fast on a field table that cannot describe `template`."""
    previous_end = 0
    for field in fields:
        if not isinstance(field.kind, FieldKind):
            raise TemplateError("field {} has unknown kind {!r}".format(field.name, field.kind))
        if field.offset < previous_end:
            raise TemplateError(
                "field {} at offset {} overlaps the previous field".format(field.name, field.offset)
            )
        previous_end = field.offset + field.width
        if previous_end > len(template):
            raise TemplateError("field {} runs past the end of the template".format(field.name))


def encode_uint(field, value):
    if isinstance(value, bool) or not isinstance(value, int):
        raise EncodingError("{} must be an integer, got {!r}".format(field.name, value))
    if value < 0 or value > MAX_UINT64:
        raise EncodingError("{} = {} does not fit a uint64".format(field.name, value))
    return put_uvarint(value)


def encode_address(field, value):
    if isinstance(value, str):
        if not encoding.is_valid_address(value):
            raise DecodingError("{} is not a valid address: {!r}".format(field.name, value))
        value = encoding.decode_address(value)
    if not isinstance(value, (bytes, bytearray)):
        raise EncodingError("{} must be an address, got {!r}".format(field.name, value))
    if len(value) != field.width:
        raise EncodingError(
            "{} must be {} bytes, got {}".format(field.name, field.width, len(value))
        )
    return bytes(value)


_ENCODERS = {
    FieldKind.UINT: encode_uint,
    FieldKind.ADDRESS: encode_address,
}


def inject(template, fields, values):
    """Return a copy of `template` with each field replaced by its value.

    Uint placeholders sit in a varint-encoded constant block, so a value whose
    encoding is longer than the placeholder pushes the following fields back;
    address placeholders are replaced byte for byte.
    """
    if len(fields) != len(values):
        raise TemplateError(
            "got {} values for {} template fields".format(len(values), len(fields))
        )
    validate_fields(template, fields)

    program = bytearray(template)
    shift = 0
    for field, value in zip(fields, values):
        encoded = _ENCODERS[field.kind](field, value)
        start = field.offset + shift
        program[start:start + field.width] = encoded
        shift += len(encoded) - field.width
    logger.debug("injected %d fields, program grew by %d bytes", len(fields), shift)
    return bytes(program)


def _walk_constants(bytecode):
    """Yield (offset, kind, index, value) for the program's constant blocks."""
    _, pos = read_uvarint(bytecode, 0)
    if pos < len(bytecode) and bytecode[pos] == INTCBLOCK:
        count, pos = read_uvarint(bytecode, pos + 1)
        for index in range(count):
            start = pos
            value, pos = read_uvarint(bytecode, pos)
            yield start, FieldKind.UINT, index, value
    if pos < len(bytecode) and bytecode[pos] == BYTECBLOCK:
        count, pos = read_uvarint(bytecode, pos + 1)
        for index in range(count):
            length, pos = read_uvarint(bytecode, pos)
            if pos + length > len(bytecode):
                raise DecodingError("byte constant {} runs past the program".format(index))
            yield pos, FieldKind.ADDRESS, index, bytes(bytecode[pos:pos + length])
            pos += length


def read_program(bytecode):
    """Return the integer and byte-string constants declared by `bytecode`."""
    ints = []
    byte_constants = []
    for _, kind, _, value in _walk_constants(bytecode):
        if kind is FieldKind.UINT:
            ints.append(value)
        else:
            byte_constants.append(value)
    return ints, byte_constants


def extract(template, fields, bytecode):
    """Read the values `inject` put into `bytecode`, in field order."""
    slots = {
        offset: (kind, index)
        for offset, kind, index, _ in _walk_constants(template)
    }
    ints, byte_constants = read_program(bytecode)
    values = []
    for field in fields:
        if slots.get(field.offset, (None,))[0] is not field.kind:
            raise TemplateError(
                "field {} does not point at a {} constant".format(field.name, field.kind.value)
            )
        _, index = slots[field.offset]
        pool = ints if field.kind is FieldKind.UINT else byte_constants
        if index >= len(pool):
            raise DecodingError("program has no constant for {}".format(field.name))
        values.append(pool[index])
    return values
