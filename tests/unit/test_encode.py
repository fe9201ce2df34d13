from unittest import TestCase
from tokenledger.db.encoder import encode, decode, make_key, MONGO_MAX_INT
from tokenledger import config


class TestEncode(TestCase):
    def test_int_to_bytes(self):
        i = 1000
        b = '1000'

        self.assertEqual(encode(i), b)

    def test_str_to_bytes(self):
        s = 'hello'
        b = '"hello"'

        self.assertEqual(encode(s), b)

    def test_decode_bytes_to_int(self):
        b = '1234'
        i = 1234

        self.assertEqual(decode(b), i)

    def test_decode_bytes_to_str(self):
        b = '"howdy"'
        s = 'howdy'

        self.assertEqual(decode(b), s)

    def test_decode_failure(self):
        b = b'xwow'

        self.assertIsNone(decode(b))

    def test_decode_none_is_none(self):
        self.assertIsNone(decode(None))

    def test_big_int_is_tagged(self):
        i = 2 ** 100

        self.assertEqual(encode(i), '{"__big_int__":"1267650600228229401496703205376"}')

    def test_max_amount_survives_round_trip(self):
        self.assertEqual(decode(encode(config.MAX_AMOUNT)), config.MAX_AMOUNT)

    def test_int_past_mongo_limit_survives_round_trip(self):
        self.assertEqual(decode(encode(MONGO_MAX_INT + 1)), MONGO_MAX_INT + 1)

    def test_big_ints_in_dict_are_tagged(self):
        d = {'a': 2 ** 64, 'b': [1, 2 ** 64]}

        _d = encode(d)

        self.assertEqual(_d, '{"a":{"__big_int__":"18446744073709551616"},'
                             '"b":[1,{"__big_int__":"18446744073709551616"}]}')
        self.assertDictEqual(decode(_d), d)

    def test_bool_is_not_treated_as_int(self):
        self.assertEqual(encode(True), 'true')

    def test_bytes_encode(self):
        self.assertEqual(encode(b'\x01\xff'), '{"__bytes__":"01ff"}')

    def test_bytes_decode(self):
        self.assertEqual(decode('{"__bytes__":"01ff"}'), b'\x01\xff')

    def test_plain_dict_decodes_to_dict(self):
        self.assertDictEqual(decode('{"x":1}'), {'x': 1})

    def test_make_key_without_args(self):
        self.assertEqual(make_key('ledger', 'total_supply'), 'ledger.total_supply')

    def test_make_key_with_args(self):
        self.assertEqual(make_key('ledger', 'allowances', ['stu', 'colin']), 'ledger.allowances:stu:colin')

