"""Payment-processor currency table.

Each row is (code, name, symbol, decimals, locale). ``decimals`` is the
minor-unit exponent the payment API expects, which is not always the
ISO 4217 value. Rows whose API exponent differs from the currency's
everyday usage are annotated.

Reference: https://stripe.com/docs/currencies

Python 3.13+. Zero external dependencies.
"""

__all__ = ["CURRENCY_ROWS"]

type _Row = tuple[str, str, str, int, str]

CURRENCY_ROWS: tuple[_Row, ...] = (
    # Major currencies
    ("USD", "US Dollar", "$", 2, "en_US"),
    ("EUR", "Euro", "€", 2, "de_DE"),
    ("GBP", "British Pound", "£", 2, "en_GB"),
    ("JPY", "Japanese Yen", "¥", 0, "ja_JP"),
    ("CNY", "Chinese Yuan", "¥", 2, "zh_CN"),
    # Americas
    ("CAD", "Canadian Dollar", "C$", 2, "en_CA"),
    ("MXN", "Mexican Peso", "$", 2, "es_MX"),
    ("BRL", "Brazilian Real", "R$", 2, "pt_BR"),
    ("ARS", "Argentine Peso", "$", 2, "es_AR"),
    ("COP", "Colombian Peso", "$", 2, "es_CO"),
    ("PEN", "Peruvian Sol", "S/", 2, "es_PE"),
    ("CLP", "Chilean Peso", "$", 0, "es_CL"),
    ("UYU", "Uruguayan Peso", "$U", 2, "es_UY"),
    ("PYG", "Paraguayan Guarani", "₲", 0, "es_PY"),
    ("BOB", "Bolivian Boliviano", "Bs", 2, "es_BO"),
    ("CRC", "Costa Rican Colón", "₡", 2, "es_CR"),
    ("DOP", "Dominican Peso", "RD$", 2, "es_DO"),
    ("GTQ", "Guatemalan Quetzal", "Q", 2, "es_GT"),
    ("HNL", "Honduran Lempira", "L", 2, "es_HN"),
    ("NIO", "Nicaraguan Córdoba", "C$", 2, "es_NI"),
    ("PAB", "Panamanian Balboa", "B/", 2, "es_PA"),
    # Europe (non-euro)
    ("CHF", "Swiss Franc", "CHF", 2, "de_CH"),
    ("SEK", "Swedish Krona", "kr", 2, "sv_SE"),
    ("DKK", "Danish Krone", "kr", 2, "da_DK"),
    ("NOK", "Norwegian Krone", "kr", 2, "nb_NO"),
    # Zero-decimal in practice; the API takes two-decimal amounts ending in 00.
    ("ISK", "Icelandic Króna", "kr", 2, "is_IS"),  # zero-decimal in everyday use
    ("PLN", "Polish Złoty", "zł", 2, "pl_PL"),
    ("CZK", "Czech Koruna", "Kč", 2, "cs_CZ"),
    # Zero-decimal for payouts; charges are two-decimal amounts divisible by 100.
    ("HUF", "Hungarian Forint", "Ft", 2, "hu_HU"),  # zero-decimal in everyday use
    ("RON", "Romanian Leu", "lei", 2, "ro_RO"),
    ("BGN", "Bulgarian Lev", "лв", 2, "bg_BG"),
    ("HRK", "Croatian Kuna", "kn", 2, "hr_HR"),
    ("RSD", "Serbian Dinar", "din", 2, "sr_RS"),
    ("MKD", "Macedonian Denar", "ден", 2, "mk_MK"),
    ("MDL", "Moldovan Leu", "L", 2, "ro_MD"),
    ("UAH", "Ukrainian Hryvnia", "₴", 2, "uk_UA"),
    ("GEL", "Georgian Lari", "₾", 2, "ka_GE"),
    ("ALL", "Albanian Lek", "L", 2, "sq_AL"),
    ("BAM", "Bosnia-Herzegovina Convertible Mark", "KM", 2, "bs_BA"),
    # Asia-Pacific
    ("HKD", "Hong Kong Dollar", "HK$", 2, "zh_HK"),
    # Zero-decimal for payouts; charges are two-decimal amounts divisible by 100.
    ("TWD", "New Taiwan Dollar", "NT$", 2, "zh_TW"),  # zero-decimal in everyday use
    ("KRW", "South Korean Won", "₩", 0, "ko_KR"),
    ("SGD", "Singapore Dollar", "S$", 2, "en_SG"),
    ("THB", "Thai Baht", "฿", 2, "th_TH"),
    ("MYR", "Malaysian Ringgit", "RM", 2, "ms_MY"),
    ("PHP", "Philippine Peso", "₱", 2, "en_PH"),
    ("IDR", "Indonesian Rupiah", "Rp", 2, "id_ID"),
    ("VND", "Vietnamese Dong", "₫", 0, "vi_VN"),
    ("INR", "Indian Rupee", "₹", 2, "en_IN"),
    ("PKR", "Pakistani Rupee", "₨", 2, "ur_PK"),
    ("BDT", "Bangladeshi Taka", "৳", 2, "bn_BD"),
    ("LKR", "Sri Lankan Rupee", "Rs", 2, "si_LK"),
    ("NPR", "Nepalese Rupee", "₨", 2, "ne_NP"),
    ("MMK", "Myanmar Kyat", "K", 2, "my_MM"),
    ("KHR", "Cambodian Riel", "៛", 2, "km_KH"),
    ("LAK", "Laotian Kip", "₭", 2, "lo_LA"),
    ("MNT", "Mongolian Tugrik", "₮", 2, "mn_MN"),
    ("BND", "Brunei Dollar", "$", 2, "ms_BN"),
    ("PGK", "Papua New Guinean Kina", "K", 2, "en_PG"),
    ("FJD", "Fijian Dollar", "$", 2, "en_FJ"),
    ("SBD", "Solomon Islands Dollar", "$", 2, "en_SB"),
    ("TOP", "Tongan Paʻanga", "T$", 2, "to_TO"),
    ("VUV", "Vanuatu Vatu", "VT", 0, "en_VU"),
    ("WST", "Samoan Tala", "WS$", 2, "en_WS"),
    ("MVR", "Maldivian Rufiyaa", "Rf", 2, "dv_MV"),
    # Oceania
    ("AUD", "Australian Dollar", "A$", 2, "en_AU"),
    ("NZD", "New Zealand Dollar", "NZ$", 2, "en_NZ"),
    # Middle East
    ("AED", "UAE Dirham", "د.إ", 2, "ar_AE"),
    ("SAR", "Saudi Riyal", "SR", 2, "ar_SA"),
    ("QAR", "Qatari Riyal", "QR", 2, "ar_QA"),
    ("OMR", "Omani Rial", "ر.ع.", 3, "ar_OM"),
    ("KWD", "Kuwaiti Dinar", "KD", 3, "ar_KW"),
    ("BHD", "Bahraini Dinar", "BD", 3, "ar_BH"),
    ("JOD", "Jordanian Dinar", "JD", 3, "ar_JO"),
    ("ILS", "Israeli New Shekel", "₪", 2, "he_IL"),
    ("TRY", "Turkish Lira", "₺", 2, "tr_TR"),
    ("LBP", "Lebanese Pound", "ل.ل", 2, "ar_LB"),
    # Africa
    ("ZAR", "South African Rand", "R", 2, "en_ZA"),
    ("EGP", "Egyptian Pound", "E£", 2, "ar_EG"),
    ("NGN", "Nigerian Naira", "₦", 2, "en_NG"),
    ("KES", "Kenyan Shilling", "KSh", 2, "en_KE"),
    ("GHS", "Ghanaian Cedi", "₵", 2, "en_GH"),
    ("MAD", "Moroccan Dirham", "MAD", 2, "ar_MA"),
    ("TND", "Tunisian Dinar", "DT", 3, "ar_TN"),
    ("DZD", "Algerian Dinar", "DA", 2, "ar_DZ"),
    ("ETB", "Ethiopian Birr", "Br", 2, "am_ET"),
    # Zero-decimal in practice; the API takes two-decimal amounts ending in 00.
    ("UGX", "Ugandan Shilling", "USh", 2, "en_UG"),  # zero-decimal in everyday use
    ("TZS", "Tanzanian Shilling", "TSh", 2, "en_TZ"),
    ("RWF", "Rwandan Franc", "FRw", 0, "rw_RW"),
    ("MUR", "Mauritian Rupee", "₨", 2, "en_MU"),
    ("SCR", "Seychellois Rupee", "₨", 2, "en_SC"),
    ("MZN", "Mozambican Metical", "MT", 2, "pt_MZ"),
    ("ZMW", "Zambian Kwacha", "ZK", 2, "en_ZM"),
    ("BWP", "Botswanan Pula", "P", 2, "en_BW"),
    ("NAD", "Namibian Dollar", "$", 2, "en_NA"),
    ("SZL", "Swazi Lilangeni", "L", 2, "en_SZ"),
    ("LSL", "Lesotho Loti", "L", 2, "en_LS"),
    ("MWK", "Malawian Kwacha", "MK", 2, "en_MW"),
    ("AOA", "Angolan Kwanza", "Kz", 2, "pt_AO"),
    ("BIF", "Burundian Franc", "FBu", 0, "rn_BI"),
    ("DJF", "Djiboutian Franc", "Fdj", 0, "fr_DJ"),
    ("GNF", "Guinean Franc", "FG", 0, "fr_GN"),
    ("KMF", "Comorian Franc", "CF", 0, "fr_KM"),
    ("CDF", "Congolese Franc", "FC", 2, "fr_CD"),
    ("MGA", "Malagasy Ariary", "Ar", 0, "mg_MG"),
    ("XAF", "Central African CFA Franc", "FCFA", 0, "fr_CM"),
    ("XOF", "West African CFA Franc", "CFA", 0, "fr_SN"),
    # Caribbean
    ("JMD", "Jamaican Dollar", "J$", 2, "en_JM"),
    ("TTD", "Trinidad & Tobago Dollar", "TT$", 2, "en_TT"),
    ("BBD", "Barbadian Dollar", "$", 2, "en_BB"),
    ("BSD", "Bahamian Dollar", "$", 2, "en_BS"),
    ("BZD", "Belize Dollar", "BZ$", 2, "en_BZ"),
    ("BMD", "Bermudan Dollar", "$", 2, "en_BM"),
    ("KYD", "Cayman Islands Dollar", "$", 2, "en_KY"),
    ("XCD", "East Caribbean Dollar", "$", 2, "en_AG"),
    ("AWG", "Aruban Florin", "ƒ", 2, "nl_AW"),
    ("ANG", "Netherlands Antillean Guilder", "ƒ", 2, "nl_CW"),
    ("HTG", "Haitian Gourde", "G", 2, "fr_HT"),
    # Former Soviet states
    ("RUB", "Russian Ruble", "₽", 2, "ru_RU"),
    ("KZT", "Kazakhstani Tenge", "₸", 2, "kk_KZ"),
    ("UZS", "Uzbekistani Som", "лв", 2, "uz_UZ"),
    ("AZN", "Azerbaijani Manat", "₼", 2, "az_AZ"),
    ("AMD", "Armenian Dram", "֏", 2, "hy_AM"),
    ("KGS", "Kyrgystani Som", "лв", 2, "ky_KG"),
    ("TJS", "Tajikistani Somoni", "SM", 2, "tg_TJ"),
    ("TMT", "Turkmenistani Manat", "T", 2, "tk_TM"),
    # Other
    ("AFN", "Afghan Afghani", "؋", 2, "fa_AF"),
    ("XPF", "CFP Franc", "₣", 0, "fr_PF"),
    ("CVE", "Cape Verdean Escudo", "$", 2, "pt_CV"),
    ("GIP", "Gibraltar Pound", "£", 2, "en_GI"),
    ("GMD", "Gambian Dalasi", "D", 2, "en_GM"),
    ("GYD", "Guyanaese Dollar", "$", 2, "en_GY"),
    ("LRD", "Liberian Dollar", "$", 2, "en_LR"),
    ("SLL", "Sierra Leonean Leone", "Le", 2, "en_SL"),
    ("SOS", "Somali Shilling", "S", 2, "so_SO"),
    ("SRD", "Surinamese Dollar", "$", 2, "nl_SR"),
    ("STD", "São Tomé & Príncipe Dobra", "Db", 2, "pt_ST"),
)
