#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# vim: set fileencoding=utf-8 :

import unittest

from isocodes.currency import *
from isocodes.errors import InvalidStringCodeError, MarshalError, UnmarshalError

import logging
#logging.basicConfig(level=logging.DEBUG)
log = logging.getLogger(__name__)


class test_currency(unittest.TestCase):

    def test_details(self):
        code = string_to_currency_code('USD')
        self.assertIs(code, CurrencyCode.USD)
        self.assertEqual(str(code), 'USD')
        self.assertEqual(code.code, 'USD')
        self.assertEqual(code.number, '840')
        self.assertEqual(code.display_name, 'United States dollar')
        self.assertEqual(code.flag, '🇺🇸')
        self.assertEqual(code.decimals, 2)
        self.assertEqual(CurrencyCode.EUR.details, CurrencyCodeDetails(
            code='EUR', name='Euro', number='978', flag='🇪🇺', decimals=2))

    def test_decimals(self):
        for s, decimals in (
                ('JPY', 0),
                ('BHD', 3),
                ('KWD', 3),
                ('USD', 2),
                ('ISK', 0),
                ('XAU', 0),
        ):
            with self.subTest(s=s):
                self.assertEqual(string_to_currency_code(s).decimals, decimals)

    def test_numbers(self):
        self.assertEqual(CurrencyCode.ALL.number, '008')
        self.assertEqual(CurrencyCode.AMD.number, '051')
        self.assertEqual(CurrencyCode.XXX.number, '999')
        # No numeric code assigned
        self.assertEqual(CurrencyCode.XFU.number, 'Nil')
        for code in list_currency_codes():
            if code is CurrencyCode.XFU:
                continue
            with self.subTest(code=code):
                self.assertEqual(len(code.number), 3)
                self.assertTrue(code.number.isdigit())

    def test_flags(self):
        for s in ('XAU', 'XAG', 'XPT', 'XPD', 'XBA', 'XDR', 'XTS', 'XXX', 'USN', 'BOV', 'BHD'):
            with self.subTest(s=s):
                self.assertEqual(string_to_currency_code(s).flag, '')
        self.assertEqual(CurrencyCode.JPY.flag, '🇯🇵')
        self.assertEqual(CurrencyCode.ANG.flag, '🇳🇱')
        self.assertEqual(sum(1 for code in list_currency_codes() if not code.flag), 43)

    def test_names(self):
        self.assertEqual(CurrencyCode.PLN.display_name, 'Polish złoty')
        self.assertEqual(CurrencyCode.STD.display_name, 'São Tomé and Príncipe dobra')

    def test_notset(self):
        code = CurrencyCode.NOTSET
        self.assertFalse(code)
        self.assertEqual(str(code), '')
        self.assertEqual(code.details, CurrencyCodeDetails())
        self.assertEqual(code.decimals, 0)
        self.assertEqual(code.number, '')
        self.assertEqual(CurrencyCode._registry.details_of(0), CurrencyCodeDetails())
        with self.assertRaises(MarshalError):
            code.marshal_text()

    def test_parse(self):
        for s in ('jpy', 'JPY', 'Jpy', 'jPy'):
            with self.subTest(s=s):
                self.assertIs(string_to_currency_code(s), CurrencyCode.JPY)
        for s in ('', 'US', 'ZZZ', 'USDX', 'JPY ', 'ÿEN'):
            with self.subTest(s=s):
                with self.assertRaises(InvalidStringCodeError):
                    string_to_currency_code(s)

    def test_list_currency_codes(self):
        codes = list_currency_codes()
        self.assertEqual(len(codes), 178)
        self.assertNotIn(CurrencyCode.NOTSET, codes)
        strs = [str(code) for code in codes]
        self.assertEqual(strs, sorted(set(strs)))
        self.assertEqual(codes[0], CurrencyCode.AED)
        self.assertEqual(codes[-1], CurrencyCode.ZMW)
        self.assertEqual(codes, CurrencyCode.list_codes())

    def test_parse_all(self):
        for code in list_currency_codes():
            with self.subTest(code=code):
                self.assertIs(string_to_currency_code(code.code.lower()), code)

    def test_text(self):
        self.assertEqual(CurrencyCode.GBP.marshal_text(), 'GBP')
        self.assertIs(CurrencyCode.unmarshal_text(b'GBP'), CurrencyCode.GBP)
        for data in (b'', b'gbp', b'GBPX', b'"GBP"'):
            with self.subTest(data=data):
                with self.assertRaises(UnmarshalError):
                    CurrencyCode.unmarshal_text(data)

    def test_json(self):
        self.assertEqual(CurrencyCode.USD.marshal_json(), '"USD"')
        self.assertIs(CurrencyCode.unmarshal_json(b'"USD"'), CurrencyCode.USD)
        for data in (b'', b'USD', b'"usd"', b'840', b'true'):
            with self.subTest(data=data):
                with self.assertRaises(UnmarshalError):
                    CurrencyCode.unmarshal_json(data)

    def test_round_trip(self):
        for code in list_currency_codes():
            with self.subTest(code=code):
                self.assertIs(CurrencyCode.unmarshal_json(code.marshal_json()), code)

    def test_isocurrency(self):
        self.assertIs(isocurrency('chf'), CurrencyCode.CHF)
        self.assertIs(isocurrency(CurrencyCode.CHF), CurrencyCode.CHF)
        with self.assertRaises(TypeError):
            isocurrency(756)

if __name__ == '__main__':
    unittest.main()
