"""Locale Whitelists — accepted ISO currency and country codes for the store profile.

Invariants:
    - Codes are stored upper-case; lookups normalize input with .strip().upper()
    - Whitelists are frozensets: membership only, no ordering guarantees
"""

CURRENCY_CODES: frozenset[str] = frozenset("""
    AED AFN ALL AMD AOA ARS AUD AWG AZN BAM BBD BDT BGN BHD BND BOB BRL BSD
    BTN BWP BYN BZD CAD CDF CHF CLP CNY COP CRC CUP CZK DJF DOP DZD EGP ERN
    ETB EUR FJD GBP GEL GHS GTQ GYD HKD HNL HRK HUF IDR INR IQD IRR JMD JOD
    JPY KES KGS KHR KID KMF KRW KWD KZT LAK LBP LKR LSL LYD MAD MDL MGA MKD
    MMK MRU MUR MVR MWK MXN MYR MZN NAD NGN NIO NPR NRU NZD OMR PAB PEN PGK
    PHP PKR PLN PYG QAR RON RSD RUB RWF SAR SBD SCR SDG SEK SGD SOS SRD SYP
    SZL THB TJS TMT TND TOP TTD TVD TWD TZS UAH UGX USD UYU UZS VES VND VUV
    WST XAF XCD XOF YER ZAR ZMW
""".split())

COUNTRY_CODES: frozenset[str] = frozenset("""
    US CA GB AU DE FR IT ES NL BE BD IN PK SG MY TH PH ID VN KR TW HK AE SA
    QA KW BH OM JO LB EG ZA NG KE GH MA TN DZ ET UG TZ RW BF CM MX BR AR CL
    CO PE UY BO PY VE DO GT HN NI CR PA CU JM BB AG TT BS BZ GY SR AW RU PL
    CZ HU RO BG HR RS BA MK AL MD UA BY GE AM AZ KZ KG UZ TJ TM AF IR IQ SY
    YE LY SD SO DJ ER MR CD AO ZM BW SZ LS NA MW MZ MG KM SC MU MV LK NP BT
    MM LA KH BN FJ PG SB VU TO WS TV NR KI PW
""".split())


def is_valid_currency(code: object) -> bool:
    return isinstance(code, str) and code.strip().upper() in CURRENCY_CODES


def is_valid_country(code: object) -> bool:
    return isinstance(code, str) and code.strip().upper() in COUNTRY_CODES
