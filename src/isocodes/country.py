# -*- coding: utf-8 -*-
# vim: set fileencoding=utf-8 :

'''ISO 3166-1 country codes.'''

__all__ = (
    'CountryCode',
    'CountryCodeDetails',
    'string_to_country_code',
    'list_country_codes',
    'isocountry',
)

import collections

from .registry import CodeRegistry, IsoCode

import logging
log = logging.getLogger(__name__)

class CountryCodeDetails(collections.namedtuple(
        'CountryCodeDetails',
        ('alpha2', 'alpha3', 'flag', 'number', 'name'),
        defaults=('', '', '', '', ''))):
    __slots__ = ()

    @property
    def short_code(self):
        return self.alpha2

class CountryCode(IsoCode):
    '''ISO 3166-1 alpha-2 country code.

    `str()` gives the alpha-2 form; `NOTSET` is the falsy "no country" value
    and has empty details.
    '''

    NOTSET = 0
    AD = 1
    AE = 2
    AF = 3
    AG = 4
    AI = 5
    AL = 6
    AM = 7
    AO = 8
    AQ = 9
    AR = 10
    AS = 11
    AT = 12
    AU = 13
    AW = 14
    AX = 15
    AZ = 16
    BA = 17
    BB = 18
    BD = 19
    BE = 20
    BF = 21
    BG = 22
    BH = 23
    BI = 24
    BJ = 25
    BL = 26
    BM = 27
    BN = 28
    BO = 29
    BQ = 30
    BR = 31
    BS = 32
    BT = 33
    BV = 34
    BW = 35
    BY = 36
    BZ = 37
    CA = 38
    CC = 39
    CD = 40
    CF = 41
    CG = 42
    CH = 43
    CI = 44
    CK = 45
    CL = 46
    CM = 47
    CN = 48
    CO = 49
    CR = 50
    CU = 51
    CV = 52
    CW = 53
    CX = 54
    CY = 55
    CZ = 56
    DE = 57
    DJ = 58
    DK = 59
    DM = 60
    DO = 61
    DZ = 62
    EC = 63
    EE = 64
    EG = 65
    EH = 66
    ER = 67
    ES = 68
    ET = 69
    FI = 70
    FJ = 71
    FK = 72
    FM = 73
    FO = 74
    FR = 75
    GA = 76
    GB = 77
    GD = 78
    GE = 79
    GF = 80
    GG = 81
    GH = 82
    GI = 83
    GL = 84
    GM = 85
    GN = 86
    GP = 87
    GQ = 88
    GR = 89
    GS = 90
    GT = 91
    GU = 92
    GW = 93
    GY = 94
    HK = 95
    HM = 96
    HN = 97
    HR = 98
    HT = 99
    HU = 100
    ID = 101
    IE = 102
    IL = 103
    IM = 104
    IN = 105
    IO = 106
    IQ = 107
    IR = 108
    IS = 109
    IT = 110
    JE = 111
    JM = 112
    JO = 113
    JP = 114
    KE = 115
    KG = 116
    KH = 117
    KI = 118
    KM = 119
    KN = 120
    KP = 121
    KR = 122
    KW = 123
    KY = 124
    KZ = 125
    LA = 126
    LB = 127
    LC = 128
    LI = 129
    LK = 130
    LR = 131
    LS = 132
    LT = 133
    LU = 134
    LV = 135
    LY = 136
    MA = 137
    MC = 138
    MD = 139
    ME = 140
    MF = 141
    MG = 142
    MH = 143
    MK = 144
    ML = 145
    MM = 146
    MN = 147
    MO = 148
    MP = 149
    MQ = 150
    MR = 151
    MS = 152
    MT = 153
    MU = 154
    MV = 155
    MW = 156
    MX = 157
    MY = 158
    MZ = 159
    NA = 160
    NC = 161
    NE = 162
    NF = 163
    NG = 164
    NI = 165
    NL = 166
    NO = 167
    NP = 168
    NR = 169
    NU = 170
    NZ = 171
    OM = 172
    PA = 173
    PE = 174
    PF = 175
    PG = 176
    PH = 177
    PK = 178
    PL = 179
    PM = 180
    PN = 181
    PR = 182
    PS = 183
    PT = 184
    PW = 185
    PY = 186
    QA = 187
    RE = 188
    RO = 189
    RS = 190
    RU = 191
    RW = 192
    SA = 193
    SB = 194
    SC = 195
    SD = 196
    SE = 197
    SG = 198
    SH = 199
    SI = 200
    SJ = 201
    SK = 202
    SL = 203
    SM = 204
    SN = 205
    SO = 206
    SR = 207
    SS = 208
    ST = 209
    SV = 210
    SX = 211
    SY = 212
    SZ = 213
    TC = 214
    TD = 215
    TF = 216
    TG = 217
    TH = 218
    TJ = 219
    TK = 220
    TL = 221
    TM = 222
    TN = 223
    TO = 224
    TR = 225
    TT = 226
    TV = 227
    TW = 228
    TZ = 229
    UA = 230
    UG = 231
    UM = 232
    US = 233
    UY = 234
    UZ = 235
    VA = 236
    VC = 237
    VE = 238
    VG = 239
    VI = 240
    VN = 241
    VU = 242
    WF = 243
    WS = 244
    YE = 245
    YT = 246
    ZA = 247
    ZM = 248
    ZW = 249

    @property
    def alpha2(self):
        return self.details.alpha2

    @property
    def alpha3(self):
        return self.details.alpha3

# Data {{{

_details_table = []

def _init_country_code(alpha2, alpha3, number, name, flag):
    _details_table.append((
        CountryCode[alpha2],
        CountryCodeDetails(alpha2=alpha2, alpha3=alpha3, flag=flag, number=number, name=name)))

_init_country_code('AD', 'AND', '020', 'Andorra', '🇦🇩')
_init_country_code('AE', 'ARE', '784', 'United Arab Emirates', '🇦🇪')
_init_country_code('AF', 'AFG', '004', 'Afghanistan', '🇦🇫')
_init_country_code('AG', 'ATG', '028', 'Antigua and Barbuda', '🇦🇬')
_init_country_code('AI', 'AIA', '660', 'Anguilla', '🇦🇮')
_init_country_code('AL', 'ALB', '008', 'Albania', '🇦🇱')
_init_country_code('AM', 'ARM', '051', 'Armenia', '🇦🇲')
_init_country_code('AO', 'AGO', '024', 'Angola', '🇦🇴')
_init_country_code('AQ', 'ATA', '010', 'Antarctica', '🇦🇶')
_init_country_code('AR', 'ARG', '032', 'Argentina', '🇦🇷')
_init_country_code('AS', 'ASM', '016', 'American Samoa', '🇦🇸')
_init_country_code('AT', 'AUT', '040', 'Austria', '🇦🇹')
_init_country_code('AU', 'AUS', '036', 'Australia', '🇦🇺')
_init_country_code('AW', 'ABW', '533', 'Aruba', '🇦🇼')
_init_country_code('AX', 'ALA', '248', 'Åland Islands', '🇦🇽')
_init_country_code('AZ', 'AZE', '031', 'Azerbaijan', '🇦🇿')
_init_country_code('BA', 'BIH', '070', 'Bosnia and Herzegovina', '🇧🇦')
_init_country_code('BB', 'BRB', '052', 'Barbados', '🇧🇧')
_init_country_code('BD', 'BGD', '050', 'Bangladesh', '🇧🇩')
_init_country_code('BE', 'BEL', '056', 'Belgium', '🇧🇪')
_init_country_code('BF', 'BFA', '854', 'Burkina Faso', '🇧🇫')
_init_country_code('BG', 'BGR', '100', 'Bulgaria', '🇧🇬')
_init_country_code('BH', 'BHR', '048', 'Bahrain', '🇧🇭')
_init_country_code('BI', 'BDI', '108', 'Burundi', '🇧🇮')
_init_country_code('BJ', 'BEN', '204', 'Benin', '🇧🇯')
_init_country_code('BL', 'BLM', '652', 'Saint Barthélemy', '🇧🇱')
_init_country_code('BM', 'BMU', '060', 'Bermuda', '🇧🇲')
_init_country_code('BN', 'BRN', '096', 'Brunei Darussalam', '🇧🇳')
_init_country_code('BO', 'BOL', '068', 'Bolivia (Plurinational State of)', '🇧🇴')
_init_country_code('BQ', 'BES', '535', 'Bonaire, Sint Eustatius and Saba', '🇧🇶')
_init_country_code('BR', 'BRA', '076', 'Brazil', '🇧🇷')
_init_country_code('BS', 'BHS', '044', 'Bahamas', '🇧🇸')
_init_country_code('BT', 'BTN', '064', 'Bhutan', '🇧🇹')
_init_country_code('BV', 'BVT', '074', 'Bouvet Island', '🇧🇻')
_init_country_code('BW', 'BWA', '072', 'Botswana', '🇧🇼')
_init_country_code('BY', 'BLR', '112', 'Belarus', '🇧🇾')
_init_country_code('BZ', 'BLZ', '084', 'Belize', '🇧🇿')
_init_country_code('CA', 'CAN', '124', 'Canada', '🇨🇦')
_init_country_code('CC', 'CCK', '166', 'Cocos (Keeling) Islands', '🇨🇨')
_init_country_code('CD', 'COD', '180', 'Congo, Democratic Republic of the', '🇨🇩')
_init_country_code('CF', 'CAF', '140', 'Central African Republic', '🇨🇫')
_init_country_code('CG', 'COG', '178', 'Congo', '🇨🇬')
_init_country_code('CH', 'CHE', '756', 'Switzerland', '🇨🇭')
_init_country_code('CI', 'CIV', '384', "Côte d'Ivoire", '🇨🇮')
_init_country_code('CK', 'COK', '184', 'Cook Islands', '🇨🇰')
_init_country_code('CL', 'CHL', '152', 'Chile', '🇨🇱')
_init_country_code('CM', 'CMR', '120', 'Cameroon', '🇨🇲')
_init_country_code('CN', 'CHN', '156', 'China', '🇨🇳')
_init_country_code('CO', 'COL', '170', 'Colombia', '🇨🇴')
_init_country_code('CR', 'CRI', '188', 'Costa Rica', '🇨🇷')
_init_country_code('CU', 'CUB', '192', 'Cuba', '🇨🇺')
_init_country_code('CV', 'CPV', '132', 'Cabo Verde', '🇨🇻')
_init_country_code('CW', 'CUW', '531', 'Curaçao', '🇨🇼')
_init_country_code('CX', 'CXR', '162', 'Christmas Island', '🇨🇽')
_init_country_code('CY', 'CYP', '196', 'Cyprus', '🇨🇾')
_init_country_code('CZ', 'CZE', '203', 'Czechia', '🇨🇿')
_init_country_code('DE', 'DEU', '276', 'Germany', '🇩🇪')
_init_country_code('DJ', 'DJI', '262', 'Djibouti', '🇩🇯')
_init_country_code('DK', 'DNK', '208', 'Denmark', '🇩🇰')
_init_country_code('DM', 'DMA', '212', 'Dominica', '🇩🇲')
_init_country_code('DO', 'DOM', '214', 'Dominican Republic', '🇩🇴')
_init_country_code('DZ', 'DZA', '012', 'Algeria', '🇩🇿')
_init_country_code('EC', 'ECU', '218', 'Ecuador', '🇪🇨')
_init_country_code('EE', 'EST', '233', 'Estonia', '🇪🇪')
_init_country_code('EG', 'EGY', '818', 'Egypt', '🇪🇬')
_init_country_code('EH', 'ESH', '732', 'Western Sahara', '🇪🇭')
_init_country_code('ER', 'ERI', '232', 'Eritrea', '🇪🇷')
_init_country_code('ES', 'ESP', '724', 'Spain', '🇪🇸')
_init_country_code('ET', 'ETH', '231', 'Ethiopia', '🇪🇹')
_init_country_code('FI', 'FIN', '246', 'Finland', '🇫🇮')
_init_country_code('FJ', 'FJI', '242', 'Fiji', '🇫🇯')
_init_country_code('FK', 'FLK', '238', 'Falkland Islands (Malvinas)', '🇫🇰')
_init_country_code('FM', 'FSM', '583', 'Micronesia (Federated States of)', '🇫🇲')
_init_country_code('FO', 'FRO', '234', 'Faroe Islands', '🇫🇴')
_init_country_code('FR', 'FRA', '250', 'France', '🇫🇷')
_init_country_code('GA', 'GAB', '266', 'Gabon', '🇬🇦')
_init_country_code('GB', 'GBR', '826', 'United Kingdom of Great Britain and Northern Ireland', '🇬🇧')
_init_country_code('GD', 'GRD', '308', 'Grenada', '🇬🇩')
_init_country_code('GE', 'GEO', '268', 'Georgia', '🇬🇪')
_init_country_code('GF', 'GUF', '254', 'French Guiana', '🇬🇫')
_init_country_code('GG', 'GGY', '831', 'Guernsey', '🇬🇬')
_init_country_code('GH', 'GHA', '288', 'Ghana', '🇬🇭')
_init_country_code('GI', 'GIB', '292', 'Gibraltar', '🇬🇮')
_init_country_code('GL', 'GRL', '304', 'Greenland', '🇬🇱')
_init_country_code('GM', 'GMB', '270', 'Gambia', '🇬🇲')
_init_country_code('GN', 'GIN', '324', 'Guinea', '🇬🇳')
_init_country_code('GP', 'GLP', '312', 'Guadeloupe', '🇬🇵')
_init_country_code('GQ', 'GNQ', '226', 'Equatorial Guinea', '🇬🇶')
_init_country_code('GR', 'GRC', '300', 'Greece', '🇬🇷')
_init_country_code('GS', 'SGS', '239', 'South Georgia and the South Sandwich Islands', '🇬🇸')
_init_country_code('GT', 'GTM', '320', 'Guatemala', '🇬🇹')
_init_country_code('GU', 'GUM', '316', 'Guam', '🇬🇺')
_init_country_code('GW', 'GNB', '624', 'Guinea-Bissau', '🇬🇼')
_init_country_code('GY', 'GUY', '328', 'Guyana', '🇬🇾')
_init_country_code('HK', 'HKG', '344', 'Hong Kong', '🇭🇰')
_init_country_code('HM', 'HMD', '334', 'Heard Island and McDonald Islands', '🇭🇲')
_init_country_code('HN', 'HND', '340', 'Honduras', '🇭🇳')
_init_country_code('HR', 'HRV', '191', 'Croatia', '🇭🇷')
_init_country_code('HT', 'HTI', '332', 'Haiti', '🇭🇹')
_init_country_code('HU', 'HUN', '348', 'Hungary', '🇭🇺')
_init_country_code('ID', 'IDN', '360', 'Indonesia', '🇮🇩')
_init_country_code('IE', 'IRL', '372', 'Ireland', '🇮🇪')
_init_country_code('IL', 'ISR', '376', 'Israel', '🇮🇱')
_init_country_code('IM', 'IMN', '833', 'Isle of Man', '🇮🇲')
_init_country_code('IN', 'IND', '356', 'India', '🇮🇳')
_init_country_code('IO', 'IOT', '086', 'British Indian Ocean Territory', '🇮🇴')
_init_country_code('IQ', 'IRQ', '368', 'Iraq', '🇮🇶')
_init_country_code('IR', 'IRN', '364', 'Iran (Islamic Republic of)', '🇮🇷')
_init_country_code('IS', 'ISL', '352', 'Iceland', '🇮🇸')
_init_country_code('IT', 'ITA', '380', 'Italy', '🇮🇹')
_init_country_code('JE', 'JEY', '832', 'Jersey', '🇯🇪')
_init_country_code('JM', 'JAM', '388', 'Jamaica', '🇯🇲')
_init_country_code('JO', 'JOR', '400', 'Jordan', '🇯🇴')
_init_country_code('JP', 'JPN', '392', 'Japan', '🇯🇵')
_init_country_code('KE', 'KEN', '404', 'Kenya', '🇰🇪')
_init_country_code('KG', 'KGZ', '417', 'Kyrgyzstan', '🇰🇬')
_init_country_code('KH', 'KHM', '116', 'Cambodia', '🇰🇭')
_init_country_code('KI', 'KIR', '296', 'Kiribati', '🇰🇮')
_init_country_code('KM', 'COM', '174', 'Comoros', '🇰🇲')
_init_country_code('KN', 'KNA', '659', 'Saint Kitts and Nevis', '🇰🇳')
_init_country_code('KP', 'PRK', '408', "Korea (Democratic People's Republic of)", '🇰🇵')
_init_country_code('KR', 'KOR', '410', 'Korea, Republic of', '🇰🇷')
_init_country_code('KW', 'KWT', '414', 'Kuwait', '🇰🇼')
_init_country_code('KY', 'CYM', '136', 'Cayman Islands', '🇰🇾')
_init_country_code('KZ', 'KAZ', '398', 'Kazakhstan', '🇰🇿')
_init_country_code('LA', 'LAO', '418', "Lao People's Democratic Republic", '🇱🇦')
_init_country_code('LB', 'LBN', '422', 'Lebanon', '🇱🇧')
_init_country_code('LC', 'LCA', '662', 'Saint Lucia', '🇱🇨')
_init_country_code('LI', 'LIE', '438', 'Liechtenstein', '🇱🇮')
_init_country_code('LK', 'LKA', '144', 'Sri Lanka', '🇱🇰')
_init_country_code('LR', 'LBR', '430', 'Liberia', '🇱🇷')
_init_country_code('LS', 'LSO', '426', 'Lesotho', '🇱🇸')
_init_country_code('LT', 'LTU', '440', 'Lithuania', '🇱🇹')
_init_country_code('LU', 'LUX', '442', 'Luxembourg', '🇱🇺')
_init_country_code('LV', 'LVA', '428', 'Latvia', '🇱🇻')
_init_country_code('LY', 'LBY', '434', 'Libya', '🇱🇾')
_init_country_code('MA', 'MAR', '504', 'Morocco', '🇲🇦')
_init_country_code('MC', 'MCO', '492', 'Monaco', '🇲🇨')
_init_country_code('MD', 'MDA', '498', 'Moldova, Republic of', '🇲🇩')
_init_country_code('ME', 'MNE', '499', 'Montenegro', '🇲🇪')
_init_country_code('MF', 'MAF', '663', 'Saint Martin (French part)', '🇲🇫')
_init_country_code('MG', 'MDG', '450', 'Madagascar', '🇲🇬')
_init_country_code('MH', 'MHL', '584', 'Marshall Islands', '🇲🇭')
_init_country_code('MK', 'MKD', '807', 'North Macedonia', '🇲🇰')
_init_country_code('ML', 'MLI', '466', 'Mali', '🇲🇱')
_init_country_code('MM', 'MMR', '104', 'Myanmar', '🇲🇲')
_init_country_code('MN', 'MNG', '496', 'Mongolia', '🇲🇳')
_init_country_code('MO', 'MAC', '446', 'Macao', '🇲🇴')
_init_country_code('MP', 'MNP', '580', 'Northern Mariana Islands', '🇲🇵')
_init_country_code('MQ', 'MTQ', '474', 'Martinique', '🇲🇶')
_init_country_code('MR', 'MRT', '478', 'Mauritania', '🇲🇷')
_init_country_code('MS', 'MSR', '500', 'Montserrat', '🇲🇸')
_init_country_code('MT', 'MLT', '470', 'Malta', '🇲🇹')
_init_country_code('MU', 'MUS', '480', 'Mauritius', '🇲🇺')
_init_country_code('MV', 'MDV', '462', 'Maldives', '🇲🇻')
_init_country_code('MW', 'MWI', '454', 'Malawi', '🇲🇼')
_init_country_code('MX', 'MEX', '484', 'Mexico', '🇲🇽')
_init_country_code('MY', 'MYS', '458', 'Malaysia', '🇲🇾')
_init_country_code('MZ', 'MOZ', '508', 'Mozambique', '🇲🇿')
_init_country_code('NA', 'NAM', '516', 'Namibia', '🇳🇦')
_init_country_code('NC', 'NCL', '540', 'New Caledonia', '🇳🇨')
_init_country_code('NE', 'NER', '562', 'Niger', '🇳🇪')
_init_country_code('NF', 'NFK', '574', 'Norfolk Island', '🇳🇫')
_init_country_code('NG', 'NGA', '566', 'Nigeria', '🇳🇬')
_init_country_code('NI', 'NIC', '558', 'Nicaragua', '🇳🇮')
_init_country_code('NL', 'NLD', '528', 'Netherlands', '🇳🇱')
_init_country_code('NO', 'NOR', '578', 'Norway', '🇳🇴')
_init_country_code('NP', 'NPL', '524', 'Nepal', '🇳🇵')
_init_country_code('NR', 'NRU', '520', 'Nauru', '🇳🇷')
_init_country_code('NU', 'NIU', '570', 'Niue', '🇳🇺')
_init_country_code('NZ', 'NZL', '554', 'New Zealand', '🇳🇿')
_init_country_code('OM', 'OMN', '512', 'Oman', '🇴🇲')
_init_country_code('PA', 'PAN', '591', 'Panama', '🇵🇦')
_init_country_code('PE', 'PER', '604', 'Peru', '🇵🇪')
_init_country_code('PF', 'PYF', '258', 'French Polynesia', '🇵🇫')
_init_country_code('PG', 'PNG', '598', 'Papua New Guinea', '🇵🇬')
_init_country_code('PH', 'PHL', '608', 'Philippines', '🇵🇭')
_init_country_code('PK', 'PAK', '586', 'Pakistan', '🇵🇰')
_init_country_code('PL', 'POL', '616', 'Poland', '🇵🇱')
_init_country_code('PM', 'SPM', '666', 'Saint Pierre and Miquelon', '🇵🇲')
_init_country_code('PN', 'PCN', '612', 'Pitcairn', '🇵🇳')
_init_country_code('PR', 'PRI', '630', 'Puerto Rico', '🇵🇷')
_init_country_code('PS', 'PSE', '275', 'Palestine, State of', '🇵🇸')
_init_country_code('PT', 'PRT', '620', 'Portugal', '🇵🇹')
_init_country_code('PW', 'PLW', '585', 'Palau', '🇵🇼')
_init_country_code('PY', 'PRY', '600', 'Paraguay', '🇵🇾')
_init_country_code('QA', 'QAT', '634', 'Qatar', '🇶🇦')
_init_country_code('RE', 'REU', '638', 'Réunion', '🇷🇪')
_init_country_code('RO', 'ROU', '642', 'Romania', '🇷🇴')
_init_country_code('RS', 'SRB', '688', 'Serbia', '🇷🇸')
_init_country_code('RU', 'RUS', '643', 'Russian Federation', '🇷🇺')
_init_country_code('RW', 'RWA', '646', 'Rwanda', '🇷🇼')
_init_country_code('SA', 'SAU', '682', 'Saudi Arabia', '🇸🇦')
_init_country_code('SB', 'SLB', '090', 'Solomon Islands', '🇸🇧')
_init_country_code('SC', 'SYC', '690', 'Seychelles', '🇸🇨')
_init_country_code('SD', 'SDN', '729', 'Sudan', '🇸🇩')
_init_country_code('SE', 'SWE', '752', 'Sweden', '🇸🇪')
_init_country_code('SG', 'SGP', '702', 'Singapore', '🇸🇬')
_init_country_code('SH', 'SHN', '654', 'Saint Helena, Ascension and Tristan da Cunha', '🇸🇭')
_init_country_code('SI', 'SVN', '705', 'Slovenia', '🇸🇮')
_init_country_code('SJ', 'SJM', '744', 'Svalbard and Jan Mayen', '🇸🇯')
_init_country_code('SK', 'SVK', '703', 'Slovakia', '🇸🇰')
_init_country_code('SL', 'SLE', '694', 'Sierra Leone', '🇸🇱')
_init_country_code('SM', 'SMR', '674', 'San Marino', '🇸🇲')
_init_country_code('SN', 'SEN', '686', 'Senegal', '🇸🇳')
_init_country_code('SO', 'SOM', '706', 'Somalia', '🇸🇴')
_init_country_code('SR', 'SUR', '740', 'Suriname', '🇸🇷')
_init_country_code('SS', 'SSD', '728', 'South Sudan', '🇸🇸')
_init_country_code('ST', 'STP', '678', 'Sao Tome and Principe', '🇸🇹')
_init_country_code('SV', 'SLV', '222', 'El Salvador', '🇸🇻')
_init_country_code('SX', 'SXM', '534', 'Sint Maarten (Dutch part)', '🇸🇽')
_init_country_code('SY', 'SYR', '760', 'Syrian Arab Republic', '🇸🇾')
_init_country_code('SZ', 'SWZ', '748', 'Eswatini', '🇸🇿')
_init_country_code('TC', 'TCA', '796', 'Turks and Caicos Islands', '🇹🇨')
_init_country_code('TD', 'TCD', '148', 'Chad', '🇹🇩')
_init_country_code('TF', 'ATF', '260', 'French Southern Territories', '🇹🇫')
_init_country_code('TG', 'TGO', '768', 'Togo', '🇹🇬')
_init_country_code('TH', 'THA', '764', 'Thailand', '🇹🇭')
_init_country_code('TJ', 'TJK', '762', 'Tajikistan', '🇹🇯')
_init_country_code('TK', 'TKL', '772', 'Tokelau', '🇹🇰')
_init_country_code('TL', 'TLS', '626', 'Timor-Leste', '🇹🇱')
_init_country_code('TM', 'TKM', '795', 'Turkmenistan', '🇹🇲')
_init_country_code('TN', 'TUN', '788', 'Tunisia', '🇹🇳')
_init_country_code('TO', 'TON', '776', 'Tonga', '🇹🇴')
_init_country_code('TR', 'TUR', '792', 'Turkey', '🇹🇷')
_init_country_code('TT', 'TTO', '780', 'Trinidad and Tobago', '🇹🇹')
_init_country_code('TV', 'TUV', '798', 'Tuvalu', '🇹🇻')
_init_country_code('TW', 'TWN', '158', 'Taiwan, Province of China', '🇹🇼')
_init_country_code('TZ', 'TZA', '834', 'Tanzania, United Republic of', '🇹🇿')
_init_country_code('UA', 'UKR', '804', 'Ukraine', '🇺🇦')
_init_country_code('UG', 'UGA', '800', 'Uganda', '🇺🇬')
_init_country_code('UM', 'UMI', '581', 'United States Minor Outlying Islands', '🇺🇲')
_init_country_code('US', 'USA', '840', 'United States of America', '🇺🇸')
_init_country_code('UY', 'URY', '858', 'Uruguay', '🇺🇾')
_init_country_code('UZ', 'UZB', '860', 'Uzbekistan', '🇺🇿')
_init_country_code('VA', 'VAT', '336', 'Holy See', '🇻🇦')
_init_country_code('VC', 'VCT', '670', 'Saint Vincent and the Grenadines', '🇻🇨')
_init_country_code('VE', 'VEN', '862', 'Venezuela (Bolivarian Republic of)', '🇻🇪')
_init_country_code('VG', 'VGB', '092', 'Virgin Islands (British)', '🇻🇬')
_init_country_code('VI', 'VIR', '850', 'Virgin Islands (U.S.)', '🇻🇮')
_init_country_code('VN', 'VNM', '704', 'Viet Nam', '🇻🇳')
_init_country_code('VU', 'VUT', '548', 'Vanuatu', '🇻🇺')
_init_country_code('WF', 'WLF', '876', 'Wallis and Futuna', '🇼🇫')
_init_country_code('WS', 'WSM', '882', 'Samoa', '🇼🇸')
_init_country_code('YE', 'YEM', '887', 'Yemen', '🇾🇪')
_init_country_code('YT', 'MYT', '175', 'Mayotte', '🇾🇹')
_init_country_code('ZA', 'ZAF', '710', 'South Africa', '🇿🇦')
_init_country_code('ZM', 'ZMB', '894', 'Zambia', '🇿🇲')
_init_country_code('ZW', 'ZWE', '716', 'Zimbabwe', '🇿🇼')

# }}}

CountryCode._registry = CodeRegistry(CountryCode, CountryCodeDetails, _details_table,
                                     short_code_len=2)
del _init_country_code, _details_table

def string_to_country_code(code):
    '''Convert an alpha-2 string (any case) to a `CountryCode`.

    Raises `InvalidStringCodeError` for strings longer than 2 characters or
    that do not name a country.
    '''
    return CountryCode._registry.parse(code)

def list_country_codes():
    '''Return all country codes sorted by their alpha-2 form.'''
    return CountryCode._registry.list_all()

def isocountry(v):
    '''Return `v` as a `CountryCode`, parsing strings case-insensitively.'''
    return CountryCode._registry.coerce(v)

# vim: ft=python ts=8 sw=4 sts=4 ai et fdm=marker
