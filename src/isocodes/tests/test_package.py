#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# vim: set fileencoding=utf-8 :

import unittest

from pathlib import Path
import importlib
import inspect

from isocodes import country
from isocodes import currency
from isocodes import registry

import logging
#logging.basicConfig(level=logging.DEBUG)
log = logging.getLogger(__name__)


class test_package(unittest.TestCase):

    def test_library_modules_only(self):
        package_dir = Path(registry.__file__).parent
        names = sorted(p.name for p in package_dir.iterdir()
                       if not p.name.startswith(('_', '.')))
        self.assertEqual(names, [
            'country.py',
            'currency.py',
            'errors.py',
            'json.py',
            'registry.py',
            'tests',
        ])
        for module_name in ('isocodes.app', 'isocodes.argparse', 'isocodes.bin'):
            with self.subTest(module_name=module_name):
                with self.assertRaises(ImportError):
                    importlib.import_module(module_name)

    def test_public_functions_documented(self):
        for module in (country, currency):
            for name in module.__all__:
                obj = getattr(module, name)
                if not inspect.isfunction(obj):
                    continue
                with self.subTest(name=name):
                    self.assertTrue(inspect.getdoc(obj))

if __name__ == '__main__':
    unittest.main()
