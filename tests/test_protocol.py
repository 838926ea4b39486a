"""Unit tests for the protocol layer.

Tests verify:
- Numeric formatting for both coordinate types
- Serializer output and bounded-buffer truncation
- Parser validation, capping and token policy
- ASCII line framing
"""
import unittest

from blendix.codec import BlendixSerial
from blendix.errors import IncompleteTriple, InvalidToken, MalformedTerminator
from blendix.models import CoordinateType, FloatTriple, IntTriple
from blendix.protocol import (
    ASCIIProtocol,
    CoordinateParser,
    CoordinateSerializer,
    format_component,
    format_float,
    format_int,
    read_bounded,
)


class TestFormatting(unittest.TestCase):
    """Tests for numeric token formatting."""
    
    def test_format_int(self):
        self.assertEqual(format_int(42), "42")
        self.assertEqual(format_int(-5), "-5")
        self.assertEqual(format_int(0), "0")
    
    def test_format_float_two_digits(self):
        """Test that decimals always carry two fraction digits."""
        self.assertEqual(format_float(3.14159), "3.14")
        self.assertEqual(format_float(2), "2.00")
        self.assertEqual(format_float(-1.5), "-1.50")
        self.assertEqual(format_float(1234567.891), "1234567.89")
    
    def test_format_float_negative_zero(self):
        self.assertEqual(format_float(-0.001), "-0.00")
    
    def test_format_component(self):
        self.assertEqual(format_component(7, CoordinateType.INT), "7")
        self.assertEqual(format_component(7, CoordinateType.FLOAT), "7.00")


class TestSerializer(unittest.TestCase):
    """Tests for CoordinateSerializer."""
    
    def setUp(self):
        self.triples = [IntTriple(1, 2, 3), IntTriple(4, 5, 6), IntTriple(7, 8, 9)]
    
    def test_serialize_int_triples(self):
        result = CoordinateSerializer.serialize(self.triples, "Hi")
        self.assertEqual(result, "1,2,3,4,5,6,7,8,9;Hi")
    
    def test_serialize_float_triples(self):
        result = CoordinateSerializer.serialize([FloatTriple(3.14159, -0.001, 2)], "")
        self.assertEqual(result, "3.14,-0.00,2.00;")
    
    def test_serialize_no_triples(self):
        """Test that zero sets produce just the label."""
        self.assertEqual(CoordinateSerializer.serialize([], "label"), ";label")
        self.assertEqual(CoordinateSerializer.serialize([], ""), ";")
    
    def test_serialize_none_text(self):
        self.assertEqual(CoordinateSerializer.serialize([IntTriple()], None), "0,0,0;")
    
    def test_serialize_into_fits(self):
        buffer = bytearray(64)
        written = CoordinateSerializer.serialize_into(buffer, self.triples, "Hi")
        
        self.assertEqual(written, len("1,2,3,4,5,6,7,8,9;Hi"))
        self.assertEqual(buffer[written], 0)
        self.assertEqual(read_bounded(buffer), "1,2,3,4,5,6,7,8,9;Hi")
    
    def test_serialize_into_truncates(self):
        """Test that a short buffer is filled, terminated and never grown."""
        buffer = bytearray(b"\xff" * 8)
        written = CoordinateSerializer.serialize_into(buffer, self.triples, "Hi")
        
        self.assertEqual(len(buffer), 8)
        self.assertEqual(written, 7)
        self.assertEqual(buffer[7], 0)
        self.assertEqual(read_bounded(buffer), "1,2,3,4")
    
    def test_serialize_into_exact_boundary(self):
        """Test that the last byte is always reserved for the terminator."""
        payload = "1,2,3;"
        
        buffer = bytearray(len(payload) + 1)
        CoordinateSerializer.serialize_into(buffer, [IntTriple(1, 2, 3)])
        self.assertEqual(read_bounded(buffer), payload)
        
        buffer = bytearray(len(payload))
        CoordinateSerializer.serialize_into(buffer, [IntTriple(1, 2, 3)])
        self.assertEqual(read_bounded(buffer), payload[:-1])
        self.assertEqual(buffer[-1], 0)
    
    def test_serialize_into_empty_buffer(self):
        """Test that a zero-capacity buffer is a no-op."""
        buffer = bytearray()
        written = CoordinateSerializer.serialize_into(buffer, self.triples, "Hi")
        self.assertEqual(written, 0)
        self.assertEqual(len(buffer), 0)
    
    def test_serialize_into_single_byte(self):
        buffer = bytearray(b"x")
        written = CoordinateSerializer.serialize_into(buffer, self.triples, "Hi")
        self.assertEqual(written, 0)
        self.assertEqual(buffer, bytearray(b"\x00"))
    
    def test_read_bounded_without_terminator(self):
        self.assertEqual(read_bounded(b"1,2,3;"), "1,2,3;")


class TestParser(unittest.TestCase):
    """Tests for CoordinateParser."""
    
    def test_parse_two_sets(self):
        result = CoordinateParser.parse("10,20,30,40,50,60;", receive_sets=2)
        self.assertEqual(result, (FloatTriple(10, 20, 30), FloatTriple(40, 50, 60)))
    
    def test_parse_caps_to_receive_sets(self):
        """Test that triples beyond receive_sets are dropped without error."""
        result = CoordinateParser.parse("1,2,3,4,5,6,7,8,9;", receive_sets=2)
        self.assertEqual(result, (FloatTriple(1, 2, 3), FloatTriple(4, 5, 6)))
    
    def test_parse_fewer_sets_than_allowed(self):
        result = CoordinateParser.parse("1,2,3;", receive_sets=5)
        self.assertEqual(result, (FloatTriple(1, 2, 3),))
    
    def test_parse_missing_terminator(self):
        with self.assertRaises(MalformedTerminator):
            CoordinateParser.parse("10,20,30,40", receive_sets=2)
    
    def test_parse_empty(self):
        with self.assertRaises(MalformedTerminator):
            CoordinateParser.parse("", receive_sets=2)
    
    def test_parse_incomplete_triple(self):
        with self.assertRaises(IncompleteTriple) as ctx:
            CoordinateParser.parse("10,20,30,40;", receive_sets=2)
        self.assertEqual(ctx.exception.value_count, 4)
    
    def test_parse_cap_applies_before_triple_check(self):
        """Test that values cut by the cap never count toward the check."""
        result = CoordinateParser.parse("10,20,30,40;", receive_sets=1)
        self.assertEqual(result, (FloatTriple(10, 20, 30),))
    
    def test_parse_zero_receive_sets(self):
        self.assertEqual(CoordinateParser.parse("1,2,3;", receive_sets=0), ())
    
    def test_parse_decimals(self):
        result = CoordinateParser.parse("1.5,-2.25,3e2;", receive_sets=1)
        self.assertEqual(result, (FloatTriple(1.5, -2.25, 300.0),))
    
    def test_parse_semicolons_inside(self):
        """Test that ';' before the end is just another delimiter."""
        result = CoordinateParser.parse("1;2;3;", receive_sets=1)
        self.assertEqual(result, (FloatTriple(1, 2, 3),))
    
    def test_parse_empty_tokens_dropped(self):
        result = CoordinateParser.parse(",,1,,2,3;;", receive_sets=1)
        self.assertEqual(result, (FloatTriple(1, 2, 3),))
    
    def test_parse_text_token_counts(self):
        """Test that a label between delimiters is read as a value."""
        with self.assertRaises(IncompleteTriple):
            CoordinateParser.parse("10,20,30;Hello;", receive_sets=2)
        result = CoordinateParser.parse("10,20,30;Hello;", receive_sets=1)
        self.assertEqual(result, (FloatTriple(10, 20, 30),))
    
    def test_parse_permissive_tokens(self):
        """Test that malformed tokens read their numeric prefix or 0."""
        result = CoordinateParser.parse("abc,12abc, 7;", receive_sets=1)
        self.assertEqual(result, (FloatTriple(0.0, 12.0, 7.0),))
    
    def test_parse_strict_rejects_token(self):
        with self.assertRaises(InvalidToken) as ctx:
            CoordinateParser.parse("1,abc,3;", receive_sets=1, strict=True)
        self.assertEqual(ctx.exception.token, "abc")
    
    def test_parse_strict_accepts_numbers(self):
        result = CoordinateParser.parse("1,-2.5,3;", receive_sets=1, strict=True)
        self.assertEqual(result, (FloatTriple(1.0, -2.5, 3.0),))
    
    def test_parse_strict_requires_whole_literal(self):
        for token in ("1_000", " 2 ", "1.5x", "0x10", "\u0661"):
            with self.assertRaises(InvalidToken):
                CoordinateParser.parse_token(token, strict=True)
    
    def test_parse_strict_literal_forms(self):
        self.assertEqual(CoordinateParser.parse_token("-.5e3", strict=True), -500.0)
        self.assertEqual(CoordinateParser.parse_token("+7.", strict=True), 7.0)
    
    def test_parse_token_prefixes(self):
        self.assertEqual(CoordinateParser.parse_token("-.5"), -0.5)
        self.assertEqual(CoordinateParser.parse_token("1e"), 1.0)
        self.assertEqual(CoordinateParser.parse_token("+4.25xyz"), 4.25)
        self.assertEqual(CoordinateParser.parse_token("x1"), 0.0)
    
    def test_tokenize(self):
        self.assertEqual(CoordinateParser.tokenize("1,2;;3,"), ["1", "2", "3"])


class TestRoundTrip(unittest.TestCase):
    """Serializer output read back by the parser."""
    
    def test_int_round_trip(self):
        triples = [IntTriple(-5, 0, 42), IntTriple(100, -200, 300)]
        wire = CoordinateSerializer.serialize(triples, "ignored")
        numeric = wire.split(";")[0] + ";"
        
        result = CoordinateParser.parse(numeric, receive_sets=2)
        self.assertEqual([t.values() for t in result], [t.values() for t in triples])
    
    def test_float_round_trip_rounds_to_two_digits(self):
        wire = CoordinateSerializer.serialize([FloatTriple(3.14159, -2.71828, 0.005)])
        result = CoordinateParser.parse(wire, receive_sets=1)
        
        self.assertAlmostEqual(result[0].x, 3.14)
        self.assertAlmostEqual(result[0].y, -2.72)
        self.assertAlmostEqual(result[0].z, 0.01, delta=0.01)


class TestASCIIProtocol(unittest.TestCase):
    """Tests for newline framing."""
    
    def setUp(self):
        self.protocol = ASCIIProtocol()
        self.codec = BlendixSerial()
    
    def test_name_and_terminator(self):
        self.assertEqual(self.protocol.name, "ascii")
        self.assertEqual(self.protocol.terminator, b"\n")
    
    def test_serialize_frame(self):
        self.codec.set_coordinates(1, 1, 2, 3)
        self.codec.set_text("Hi")
        self.assertEqual(self.protocol.serialize_frame(self.codec), b"1,2,3;Hi\n")
    
    def test_parse_frame_strips_line_ending(self):
        self.codec.set_rx_sets(1)
        self.assertTrue(self.protocol.parse_frame(b"10,20,30;\r\n", self.codec))
        self.assertEqual(self.codec.get_received_coordinates(0), FloatTriple(10, 20, 30))
    
    def test_parse_frame_rejected(self):
        self.codec.set_rx_sets(1)
        self.assertFalse(self.protocol.parse_frame(b"10,20,30\n", self.codec))
        self.assertEqual(self.codec.received_num_sets, 0)
    
    def test_custom_terminator(self):
        protocol = ASCIIProtocol(terminator=b"\r\n")
        self.assertEqual(protocol.serialize_frame(self.codec), b"0,0,0;\r\n")


if __name__ == "__main__":
    unittest.main()
