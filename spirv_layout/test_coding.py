from spirv_layout.coding import BufferTooShort, Decoder, Encoder, string_words
from spirv_layout.constants import MAGIC_NUMBER
from spirv_layout.errors import InvalidOp
import pytest


def test_decoder() -> None:
    decoder = Decoder([0x11, 0x22, 0x33])
    assert decoder.peek(0) == 0x11
    assert decoder.peek(2) == 0x33
    assert decoder.word() == 0x11
    assert decoder.get_pos() == 1
    assert list(decoder.take(2)) == [0x22, 0x33]
    assert decoder.at_end()


def test_decoder_errors() -> None:
    decoder = Decoder([0x11])
    assert decoder.word() == 0x11
    with pytest.raises(BufferTooShort):
        decoder.word()

    decoder = Decoder([0x22])
    with pytest.raises(BufferTooShort):
        decoder.take(2)
    with pytest.raises(BufferTooShort):
        decoder.peek(1)
    assert decoder.get_pos() == 0


def test_buffer_too_short_is_invalid_op() -> None:
    with pytest.raises(InvalidOp):
        Decoder([]).word()


def test_string_words_padding() -> None:
    # "main" needs a whole extra word for its terminator
    assert string_words("main") == [0x6E69616D, 0x00000000]
    assert string_words("abc") == [0x00636261]
    assert string_words("") == [0]


def test_encoder() -> None:
    encoder = Encoder()
    encoder.header(bound=9)
    assert encoder.words == [MAGIC_NUMBER, 0x00010000, 0, 9, 0]

    encoder = Encoder()
    encoder.instruction(19, 1)
    assert encoder.words == [(2 << 16) | 19, 1]

    encoder = Encoder()
    encoder.instruction(5, 7, "ab")
    assert encoder.words == [(3 << 16) | 5, 7, 0x00006261]


def test_encoder_value_too_large() -> None:
    encoder = Encoder()
    with pytest.raises(ValueError):
        encoder.word(1 << 32)
