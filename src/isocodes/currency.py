# -*- coding: utf-8 -*-
# vim: set fileencoding=utf-8 :

'''ISO 4217 currency codes.'''

__all__ = (
    'CurrencyCode',
    'CurrencyCodeDetails',
    'string_to_currency_code',
    'list_currency_codes',
    'isocurrency',
)

import collections

from .registry import CodeRegistry, IsoCode

import logging
log = logging.getLogger(__name__)

class CurrencyCodeDetails(collections.namedtuple(
        'CurrencyCodeDetails',
        ('code', 'name', 'number', 'flag', 'decimals'),
        defaults=('', '', '', '', 0))):
    __slots__ = ()

    @property
    def short_code(self):
        return self.code

class CurrencyCode(IsoCode):
    '''ISO 4217 alphabetic currency code.'''

    NOTSET = 0
    AED = 1
    AFN = 2
    ALL = 3
    AMD = 4
    ANG = 5
    AOA = 6
    ARS = 7
    AUD = 8
    AWG = 9
    AZN = 10
    BAM = 11
    BBD = 12
    BDT = 13
    BGN = 14
    BHD = 15
    BIF = 16
    BMD = 17
    BND = 18
    BOB = 19
    BOV = 20
    BRL = 21
    BSD = 22
    BTN = 23
    BWP = 24
    BYR = 25
    BZD = 26
    CAD = 27
    CDF = 28
    CHE = 29
    CHF = 30
    CHW = 31
    CLF = 32
    CLP = 33
    CNY = 34
    COP = 35
    COU = 36
    CRC = 37
    CUC = 38
    CUP = 39
    CVE = 40
    CZK = 41
    DJF = 42
    DKK = 43
    DOP = 44
    DZD = 45
    EGP = 46
    ERN = 47
    ETB = 48
    EUR = 49
    FJD = 50
    FKP = 51
    GBP = 52
    GEL = 53
    GHS = 54
    GIP = 55
    GMD = 56
    GNF = 57
    GTQ = 58
    GYD = 59
    HKD = 60
    HNL = 61
    HRK = 62
    HTG = 63
    HUF = 64
    IDR = 65
    ILS = 66
    INR = 67
    IQD = 68
    IRR = 69
    ISK = 70
    JMD = 71
    JOD = 72
    JPY = 73
    KES = 74
    KGS = 75
    KHR = 76
    KMF = 77
    KPW = 78
    KRW = 79
    KWD = 80
    KYD = 81
    KZT = 82
    LAK = 83
    LBP = 84
    LKR = 85
    LRD = 86
    LSL = 87
    LTL = 88
    LVL = 89
    LYD = 90
    MAD = 91
    MDL = 92
    MGA = 93
    MKD = 94
    MMK = 95
    MNT = 96
    MOP = 97
    MRO = 98
    MUR = 99
    MVR = 100
    MWK = 101
    MXN = 102
    MXV = 103
    MYR = 104
    MZN = 105
    NAD = 106
    NGN = 107
    NIO = 108
    NOK = 109
    NPR = 110
    NZD = 111
    OMR = 112
    PAB = 113
    PEN = 114
    PGK = 115
    PHP = 116
    PKR = 117
    PLN = 118
    PYG = 119
    QAR = 120
    RON = 121
    RSD = 122
    RUB = 123
    RWF = 124
    SAR = 125
    SBD = 126
    SCR = 127
    SDG = 128
    SEK = 129
    SGD = 130
    SHP = 131
    SLL = 132
    SOS = 133
    SRD = 134
    SSP = 135
    STD = 136
    SYP = 137
    SZL = 138
    THB = 139
    TJS = 140
    TMT = 141
    TND = 142
    TOP = 143
    TRY = 144
    TTD = 145
    TWD = 146
    TZS = 147
    UAH = 148
    UGX = 149
    USD = 150
    USN = 151
    USS = 152
    UYI = 153
    UYU = 154
    UZS = 155
    VEF = 156
    VND = 157
    VUV = 158
    WST = 159
    XAF = 160
    XAG = 161
    XAU = 162
    XBA = 163
    XBB = 164
    XBC = 165
    XBD = 166
    XCD = 167
    XDR = 168
    XFU = 169
    XOF = 170
    XPD = 171
    XPF = 172
    XPT = 173
    XTS = 174
    XXX = 175
    YER = 176
    ZAR = 177
    ZMW = 178

    @property
    def code(self):
        return self.details.code

    @property
    def decimals(self):
        # Number of minor unit digits
        return self.details.decimals

# Data {{{

_details_table = []

def _init_currency_code(code, number, name, flag, decimals):
    _details_table.append((
        CurrencyCode[code],
        CurrencyCodeDetails(code=code, name=name, number=number, flag=flag, decimals=decimals)))

_init_currency_code('AED', '784', 'United Arab Emirates dirham', '🇦🇪', 2)
_init_currency_code('AFN', '971', 'Afghan afghani', '🇦🇫', 2)
_init_currency_code('ALL', '008', 'Albanian lek', '🇦🇱', 2)
_init_currency_code('AMD', '051', 'Armenian dram', '🇦🇲', 2)
_init_currency_code('ANG', '532', 'Netherlands Antillean guilder', '🇳🇱', 2)
_init_currency_code('AOA', '973', 'Angolan kwanza', '🇦🇴', 2)
_init_currency_code('ARS', '032', 'Argentine peso', '🇦🇷', 2)
_init_currency_code('AUD', '036', 'Australian dollar', '🇦🇺', 2)
_init_currency_code('AWG', '533', 'Aruban florin', '🇦🇼', 2)
_init_currency_code('AZN', '944', 'Azerbaijani manat', '🇦🇿', 2)
_init_currency_code('BAM', '977', 'Bosnia and Herzegovina convertible mark', '🇧🇦', 2)
_init_currency_code('BBD', '052', 'Barbados dollar', '🇧🇧', 2)
_init_currency_code('BDT', '050', 'Bangladeshi taka', '🇧🇩', 2)
_init_currency_code('BGN', '975', 'Bulgarian lev', '🇧🇬', 2)
_init_currency_code('BHD', '048', 'Bahraini dinar', '', 3)
_init_currency_code('BIF', '108', 'Burundian franc', '🇧🇮', 0)
_init_currency_code('BMD', '060', 'Bermudian dollar (customarily known as Bermuda dollar)', '🇧🇲', 2)
_init_currency_code('BND', '096', 'Brunei dollar', '🇧🇳', 2)
_init_currency_code('BOB', '068', 'Boliviano', '🇧🇴', 2)
_init_currency_code('BOV', '984', 'Bolivian Mvdol (funds code)', '', 2)
_init_currency_code('BRL', '986', 'Brazilian real', '🇧🇷', 2)
_init_currency_code('BSD', '044', 'Bahamian dollar', '🇧🇸', 2)
_init_currency_code('BTN', '064', 'Bhutanese ngultrum', '', 2)
_init_currency_code('BWP', '072', 'Botswana pula', '🇧🇼', 2)
_init_currency_code('BYR', '974', 'Belarusian ruble', '', 0)
_init_currency_code('BZD', '084', 'Belize dollar', '🇧🇿', 2)
_init_currency_code('CAD', '124', 'Canadian dollar', '🇨🇦', 2)
_init_currency_code('CDF', '976', 'Congolese franc', '🇨🇩', 2)
_init_currency_code('CHE', '947', 'WIR Euro (complementary currency)', '', 2)
_init_currency_code('CHF', '756', 'Swiss franc', '🇨🇭', 2)
_init_currency_code('CHW', '948', 'WIR Franc (complementary currency)', '', 2)
_init_currency_code('CLF', '990', 'Unidad de Fomento (funds code)', '', 0)
_init_currency_code('CLP', '152', 'Chilean peso', '🇨🇱', 0)
_init_currency_code('CNY', '156', 'Chinese yuan', '🇨🇳', 2)
_init_currency_code('COP', '170', 'Colombian peso', '🇨🇴', 2)
_init_currency_code('COU', '970', 'Unidad de Valor Real', '', 2)
_init_currency_code('CRC', '188', 'Costa Rican colon', '🇨🇷', 2)
_init_currency_code('CUC', '931', 'Cuban convertible peso', '', 2)
_init_currency_code('CUP', '192', 'Cuban peso', '', 2)
_init_currency_code('CVE', '132', 'Cape Verde escudo', '🇨🇻', 0)
_init_currency_code('CZK', '203', 'Czech koruna', '🇨🇿', 2)
_init_currency_code('DJF', '262', 'Djiboutian franc', '🇩🇯', 0)
_init_currency_code('DKK', '208', 'Danish krone', '🇩🇰', 2)
_init_currency_code('DOP', '214', 'Dominican peso', '🇩🇴', 2)
_init_currency_code('DZD', '012', 'Algerian dinar', '🇩🇿', 2)
_init_currency_code('EGP', '818', 'Egyptian pound', '🇪🇬', 2)
_init_currency_code('ERN', '232', 'Eritrean nakfa', '', 2)
_init_currency_code('ETB', '230', 'Ethiopian birr', '🇪🇹', 2)
_init_currency_code('EUR', '978', 'Euro', '🇪🇺', 2)
_init_currency_code('FJD', '242', 'Fiji dollar', '🇫🇯', 2)
_init_currency_code('FKP', '238', 'Falkland Islands pound', '🇫🇰', 2)
_init_currency_code('GBP', '826', 'Pound sterling', '🇬🇧', 2)
_init_currency_code('GEL', '981', 'Georgian lari', '🇬🇪', 2)
_init_currency_code('GHS', '936', 'Ghanaian cedi', '', 2)
_init_currency_code('GIP', '292', 'Gibraltar pound', '🇬🇮', 2)
_init_currency_code('GMD', '270', 'Gambian dalasi', '🇬🇲', 2)
_init_currency_code('GNF', '324', 'Guinean franc', '🇬🇳', 0)
_init_currency_code('GTQ', '320', 'Guatemalan quetzal', '🇬🇹', 2)
_init_currency_code('GYD', '328', 'Guyanese dollar', '🇬🇾', 2)
_init_currency_code('HKD', '344', 'Hong Kong dollar', '🇭🇰', 2)
_init_currency_code('HNL', '340', 'Honduran lempira', '🇭🇳', 2)
_init_currency_code('HRK', '191', 'Croatian kuna', '🇭🇷', 2)
_init_currency_code('HTG', '332', 'Haitian gourde', '🇭🇹', 2)
_init_currency_code('HUF', '348', 'Hungarian forint', '🇭🇺', 2)
_init_currency_code('IDR', '360', 'Indonesian rupiah', '🇮🇩', 2)
_init_currency_code('ILS', '376', 'Israeli new shekel', '🇮🇱', 2)
_init_currency_code('INR', '356', 'Indian rupee', '🇮🇳', 2)
_init_currency_code('IQD', '368', 'Iraqi dinar', '', 3)
_init_currency_code('IRR', '364', 'Iranian rial', '', 0)
_init_currency_code('ISK', '352', 'Icelandic króna', '🇮🇸', 0)
_init_currency_code('JMD', '388', 'Jamaican dollar', '🇯🇲', 2)
_init_currency_code('JOD', '400', 'Jordanian dinar', '', 3)
_init_currency_code('JPY', '392', 'Japanese yen', '🇯🇵', 0)
_init_currency_code('KES', '404', 'Kenyan shilling', '🇰🇪', 2)
_init_currency_code('KGS', '417', 'Kyrgyzstani som', '🇰🇬', 2)
_init_currency_code('KHR', '116', 'Cambodian riel', '🇰🇭', 2)
_init_currency_code('KMF', '174', 'Comoro franc', '🇰🇲', 0)
_init_currency_code('KPW', '408', 'North Korean won', '', 0)
_init_currency_code('KRW', '410', 'South Korean won', '🇰🇷', 0)
_init_currency_code('KWD', '414', 'Kuwaiti dinar', '', 3)
_init_currency_code('KYD', '136', 'Cayman Islands dollar', '🇰🇾', 2)
_init_currency_code('KZT', '398', 'Kazakhstani tenge', '🇰🇿', 2)
_init_currency_code('LAK', '418', 'Lao kip', '🇱🇦', 0)
_init_currency_code('LBP', '422', 'Lebanese pound', '🇱🇧', 0)
_init_currency_code('LKR', '144', 'Sri Lankan rupee', '🇱🇰', 2)
_init_currency_code('LRD', '430', 'Liberian dollar', '🇱🇷', 2)
_init_currency_code('LSL', '426', 'Lesotho loti', '🇱🇸', 2)
_init_currency_code('LTL', '440', 'Lithuanian litas', '', 2)
_init_currency_code('LVL', '428', 'Latvian lats', '', 2)
_init_currency_code('LYD', '434', 'Libyan dinar', '', 3)
_init_currency_code('MAD', '504', 'Moroccan dirham', '🇲🇦', 2)
_init_currency_code('MDL', '498', 'Moldovan leu', '🇲🇩', 2)
_init_currency_code('MGA', '969', 'Malagasy ariary', '🇲🇬', 0)
_init_currency_code('MKD', '807', 'Macedonian denar', '🇲🇰', 0)
_init_currency_code('MMK', '104', 'Myanma kyat', '🇲🇲', 0)
_init_currency_code('MNT', '496', 'Mongolian tugrik', '🇲🇳', 2)
_init_currency_code('MOP', '446', 'Macanese pataca', '🇲🇴', 2)
_init_currency_code('MRO', '478', 'Mauritanian ouguiya', '🇲🇷', 0)
_init_currency_code('MUR', '480', 'Mauritian rupee', '🇲🇺', 2)
_init_currency_code('MVR', '462', 'Maldivian rufiyaa', '🇲🇻', 2)
_init_currency_code('MWK', '454', 'Malawian kwacha', '🇲🇼', 2)
_init_currency_code('MXN', '484', 'Mexican peso', '🇲🇽', 2)
_init_currency_code('MXV', '979', 'Mexican Unidad de Inversion (UDI) (funds code)', '', 2)
_init_currency_code('MYR', '458', 'Malaysian ringgit', '🇲🇾', 2)
_init_currency_code('MZN', '943', 'Mozambican metical', '🇲🇿', 2)
_init_currency_code('NAD', '516', 'Namibian dollar', '🇳🇦', 2)
_init_currency_code('NGN', '566', 'Nigerian naira', '🇳🇬', 2)
_init_currency_code('NIO', '558', 'Nicaraguan córdoba', '🇳🇮', 2)
_init_currency_code('NOK', '578', 'Norwegian krone', '🇳🇴', 2)
_init_currency_code('NPR', '524', 'Nepalese rupee', '🇳🇵', 2)
_init_currency_code('NZD', '554', 'New Zealand dollar', '🇳🇿', 2)
_init_currency_code('OMR', '512', 'Omani rial', '', 3)
_init_currency_code('PAB', '590', 'Panamanian balboa', '🇵🇦', 2)
_init_currency_code('PEN', '604', 'Peruvian nuevo sol', '🇵🇪', 2)
_init_currency_code('PGK', '598', 'Papua New Guinean kina', '🇵🇬', 2)
_init_currency_code('PHP', '608', 'Philippine peso', '🇵🇭', 2)
_init_currency_code('PKR', '586', 'Pakistani rupee', '🇵🇰', 2)
_init_currency_code('PLN', '985', 'Polish złoty', '🇵🇱', 2)
_init_currency_code('PYG', '600', 'Paraguayan guaraní', '🇵🇾', 0)
_init_currency_code('QAR', '634', 'Qatari riyal', '🇶🇦', 2)
_init_currency_code('RON', '946', 'Romanian new leu', '🇷🇴', 2)
_init_currency_code('RSD', '941', 'Serbian dinar', '🇷🇸', 2)
_init_currency_code('RUB', '643', 'Russian rouble', '🇷🇺', 2)
_init_currency_code('RWF', '646', 'Rwandan franc', '🇷🇼', 0)
_init_currency_code('SAR', '682', 'Saudi riyal', '🇸🇦', 2)
_init_currency_code('SBD', '090', 'Solomon Islands dollar', '🇸🇧', 2)
_init_currency_code('SCR', '690', 'Seychelles rupee', '🇸🇨', 2)
_init_currency_code('SDG', '938', 'Sudanese pound', '', 2)
_init_currency_code('SEK', '752', 'Swedish krona/kronor', '🇸🇪', 2)
_init_currency_code('SGD', '702', 'Singapore dollar', '🇸🇬', 2)
_init_currency_code('SHP', '654', 'Saint Helena pound', '🇸🇭', 2)
_init_currency_code('SLL', '694', 'Sierra Leonean leone', '🇸🇱', 0)
_init_currency_code('SOS', '706', 'Somali shilling', '🇸🇴', 2)
_init_currency_code('SRD', '968', 'Surinamese dollar', '🇸🇷', 2)
_init_currency_code('SSP', '728', 'South Sudanese pound', '', 2)
_init_currency_code('STD', '678', 'São Tomé and Príncipe dobra', '🇸🇹', 0)
_init_currency_code('SYP', '760', 'Syrian pound', '', 2)
_init_currency_code('SZL', '748', 'Swazi lilangeni', '🇸🇿', 2)
_init_currency_code('THB', '764', 'Thai baht', '🇹🇭', 2)
_init_currency_code('TJS', '972', 'Tajikistani somoni', '🇹🇯', 2)
_init_currency_code('TMT', '934', 'Turkmenistani manat', '', 2)
_init_currency_code('TND', '788', 'Tunisian dinar', '', 3)
_init_currency_code('TOP', '776', 'Tongan paʻanga', '🇹🇴', 2)
_init_currency_code('TRY', '949', 'Turkish lira', '🇹🇷', 2)
_init_currency_code('TTD', '780', 'Trinidad and Tobago dollar', '🇹🇹', 2)
_init_currency_code('TWD', '901', 'New Taiwan dollar', '🇹🇼', 2)
_init_currency_code('TZS', '834', 'Tanzanian shilling', '🇹🇿', 2)
_init_currency_code('UAH', '980', 'Ukrainian hryvnia', '🇺🇦', 2)
_init_currency_code('UGX', '800', 'Ugandan shilling', '🇺🇬', 2)
_init_currency_code('USD', '840', 'United States dollar', '🇺🇸', 2)
_init_currency_code('USN', '997', 'United States dollar (next day) (funds code)', '', 2)
_init_currency_code('USS', '998', 'United States dollar (same day) (funds code)', '', 2)
_init_currency_code('UYI', '940', 'Uruguay Peso en Unidades Indexadas (URUIURUI) (funds code)', '', 0)
_init_currency_code('UYU', '858', 'Uruguayan peso', '🇺🇾', 2)
_init_currency_code('UZS', '860', 'Uzbekistan som', '🇺🇿', 2)
_init_currency_code('VEF', '937', 'Venezuelan bolívar fuerte', '', 2)
_init_currency_code('VND', '704', 'Vietnamese dong', '🇻🇳', 0)
_init_currency_code('VUV', '548', 'Vanuatu vatu', '🇻🇺', 0)
_init_currency_code('WST', '882', 'Samoan tala', '🇼🇸', 2)
_init_currency_code('XAF', '950', 'CFA franc BEAC', '🇨🇲', 0)
_init_currency_code('XAG', '961', 'Silver (one troy ounce)', '', 0)
_init_currency_code('XAU', '959', 'Gold (one troy ounce)', '', 0)
_init_currency_code('XBA', '955', 'European Composite Unit (EURCO) (bond market unit)', '', 0)
_init_currency_code('XBB', '956', 'European Monetary Unit (E.M.U.-6) (bond market unit)', '', 0)
_init_currency_code('XBC', '957', 'European Unit of Account 9 (E.U.A.-9) (bond market unit)', '', 0)
_init_currency_code('XBD', '958', 'European Unit of Account 17 (E.U.A.-17) (bond market unit)', '', 0)
_init_currency_code('XCD', '951', 'East Caribbean dollar', '🇦🇮', 2)
_init_currency_code('XDR', '960', 'Special drawing rights', '', 0)
_init_currency_code('XFU', 'Nil', 'UIC franc (special settlement currency)', '', 0)
_init_currency_code('XOF', '952', 'CFA franc BCEAO', '🇧🇯', 0)
_init_currency_code('XPD', '964', 'Palladium (one troy ounce)', '', 0)
_init_currency_code('XPF', '953', 'CFP franc', '🇵🇫', 0)
_init_currency_code('XPT', '962', 'Platinum (one troy ounce)', '', 0)
_init_currency_code('XTS', '963', 'Code reserved for testing purposes', '', 0)
_init_currency_code('XXX', '999', 'No currency', '', 0)
_init_currency_code('YER', '886', 'Yemeni rial', '🇾🇪', 2)
_init_currency_code('ZAR', '710', 'South African rand', '🇿🇦', 2)
_init_currency_code('ZMW', '967', 'Zambian kwacha', '🇿🇲', 2)

# }}}

CurrencyCode._registry = CodeRegistry(CurrencyCode, CurrencyCodeDetails, _details_table,
                                      short_code_len=3)
del _init_currency_code, _details_table

def string_to_currency_code(code):
    '''Convert an alphabetic code string (any case) to a `CurrencyCode`.

    Raises `InvalidStringCodeError` for strings longer than 3 characters or
    that do not name a currency.
    '''
    return CurrencyCode._registry.parse(code)

def list_currency_codes():
    '''Return all currency codes sorted by their alphabetic code.'''
    return CurrencyCode._registry.list_all()

def isocurrency(v):
    '''Return `v` as a `CurrencyCode`, parsing strings case-insensitively.'''
    return CurrencyCode._registry.coerce(v)

# vim: ft=python ts=8 sw=4 sts=4 ai et fdm=marker
