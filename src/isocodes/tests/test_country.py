#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# vim: set fileencoding=utf-8 :

import unittest

from isocodes.country import *
from isocodes.errors import InvalidStringCodeError, MarshalError, UnmarshalError

import logging
#logging.basicConfig(level=logging.DEBUG)
log = logging.getLogger(__name__)


class test_country(unittest.TestCase):

    def test_details(self):
        code = string_to_country_code('US')
        self.assertIs(code, CountryCode.US)
        self.assertEqual(str(code), 'US')
        self.assertEqual(code.alpha2, 'US')
        self.assertEqual(code.alpha3, 'USA')
        self.assertEqual(code.number, '840')
        self.assertEqual(code.display_name, 'United States of America')
        self.assertEqual(code.flag, '🇺🇸')
        self.assertEqual(code.details, CountryCodeDetails(
            alpha2='US', alpha3='USA', flag='🇺🇸', number='840',
            name='United States of America'))

        self.assertEqual(CountryCode.AX.display_name, 'Åland Islands')
        self.assertEqual(CountryCode.AF.number, '004')
        self.assertEqual(CountryCode.GB.alpha3, 'GBR')
        self.assertEqual(f'{CountryCode.DE}', 'DE')

    def test_notset(self):
        code = CountryCode.NOTSET
        self.assertFalse(code)
        self.assertTrue(CountryCode.AD)
        self.assertEqual(code.value, 0)
        self.assertEqual(CountryCode.AD.value, 1)
        self.assertEqual(str(code), '')
        self.assertEqual(code.details, CountryCodeDetails())
        for attr in ('alpha2', 'alpha3', 'number', 'display_name', 'flag'):
            with self.subTest(attr=attr):
                self.assertEqual(getattr(code, attr), '')
        with self.assertRaises(MarshalError):
            code.marshal_text()
        with self.assertRaises(MarshalError):
            code.marshal_json()

    def test_details_of(self):
        registry = CountryCode._registry
        empty = CountryCodeDetails()
        for code in (0, CountryCode.NOTSET, 250, -1, 'US', None):
            with self.subTest(code=code):
                self.assertEqual(registry.details_of(code), empty)
        self.assertEqual(registry.details_of(CountryCode.FR.value).alpha3, 'FRA')

    def test_parse(self):
        for s in ('us', 'US', 'Us', 'uS'):
            with self.subTest(s=s):
                self.assertIs(string_to_country_code(s), CountryCode.US)
                self.assertIs(CountryCode.parse(s), CountryCode.US)
        for s in (
                '',
                'U',
                'ZZ',
                'ZZZ',  # too long
                'USA',  # too long, even though it is an alpha-3
                'USDX',
                'ÅX',
                ' US',
        ):
            with self.subTest(s=s):
                with self.assertRaises(InvalidStringCodeError):
                    string_to_country_code(s)
        with self.assertRaises(TypeError):
            string_to_country_code(b'US')

    def test_parse_all(self):
        for code in list_country_codes():
            with self.subTest(code=code):
                s = str(code)
                self.assertIs(string_to_country_code(s.lower()), code)
                self.assertEqual(string_to_country_code(s).details.alpha2, s.upper())

    def test_list_country_codes(self):
        codes = list_country_codes()
        self.assertEqual(len(codes), 249)
        self.assertEqual(len(set(codes)), 249)
        self.assertNotIn(CountryCode.NOTSET, codes)
        alpha2s = [code.alpha2 for code in codes]
        self.assertEqual(alpha2s, sorted(alpha2s))
        for a, b in zip(alpha2s, alpha2s[1:]):
            self.assertLess(a, b)
        self.assertEqual(codes[0], CountryCode.AD)
        self.assertEqual(codes[-1], CountryCode.ZW)
        self.assertEqual(codes, CountryCode.list_codes())
        self.assertEqual(codes, [code for code in CountryCode if code])
        # Each call returns a new list
        codes.clear()
        self.assertEqual(len(list_country_codes()), 249)

    def test_registry_readonly(self):
        registry = CountryCode._registry
        self.assertEqual(len(registry), 249)
        self.assertNotIn('', registry.index)
        self.assertNotIn(CountryCode.NOTSET, registry)
        for short_code, code in registry.index.items():
            self.assertEqual(registry.details_of(code).short_code, short_code)
        with self.assertRaises(TypeError):
            registry.index['XX'] = CountryCode.US
        with self.assertRaises(TypeError):
            registry.details_map[CountryCode.NOTSET] = CountryCodeDetails()

    def test_flags(self):
        self.assertEqual(CountryCode.JP.flag, '🇯🇵')
        for code in list_country_codes():
            with self.subTest(code=code):
                self.assertTrue(code.flag)
                self.assertEqual(len(code.alpha3), 3)
                self.assertEqual(len(code.number), 3)
                self.assertTrue(code.number.isdigit())

    def test_text(self):
        self.assertEqual(CountryCode.US.marshal_text(), 'US')
        for data in (b'US', 'US', bytearray(b'US')):
            with self.subTest(data=data):
                self.assertIs(CountryCode.unmarshal_text(data), CountryCode.US)
        for data in (b'', '', b'us', b'"US"', b'USA', b'\xff', None, 42):
            with self.subTest(data=data):
                with self.assertRaises(UnmarshalError):
                    CountryCode.unmarshal_text(data)

    def test_json(self):
        data = CountryCode.US.marshal_json()
        self.assertEqual(data, '"US"')
        self.assertEqual(len(data), 4)
        for data in (b'"US"', '"US"', ' "US" '):
            with self.subTest(data=data):
                self.assertIs(CountryCode.unmarshal_json(data), CountryCode.US)
        for data in (b'', b'US', b'"us"', b'"USA"', b'42', b'null', b'["US"]', b'{"US": 1}', b'"'):
            with self.subTest(data=data):
                with self.assertRaises(UnmarshalError):
                    CountryCode.unmarshal_json(data)

    def test_round_trip(self):
        for code in list_country_codes():
            with self.subTest(code=code):
                self.assertIs(CountryCode.unmarshal_text(code.marshal_text().encode()), code)
                self.assertIs(CountryCode.unmarshal_json(code.marshal_json()), code)

    def test_isocountry(self):
        self.assertIs(isocountry('gb'), CountryCode.GB)
        self.assertIs(isocountry(CountryCode.GB), CountryCode.GB)
        with self.assertRaises(InvalidStringCodeError):
            isocountry('gbr')
        with self.assertRaises(TypeError):
            isocountry(826)

if __name__ == '__main__':
    unittest.main()
