PIX_GUI = "br.gov.bcb.pix"

# Top-level EMV MPM field ids, in emission order.
ID_PAYLOAD_FORMAT = "00"
ID_POINT_OF_INITIATION = "01"
ID_MERCHANT_ACCOUNT = "26"
ID_MERCHANT_CATEGORY = "52"
ID_CURRENCY = "53"
ID_AMOUNT = "54"
ID_COUNTRY = "58"
ID_MERCHANT_NAME = "59"
ID_MERCHANT_CITY = "60"
ID_ADDITIONAL_DATA = "62"
ID_CRC = "63"

# Sub-field ids.
ID_GUI = "00"
ID_PIX_KEY = "01"
ID_REFERENCE_LABEL = "05"

PAYLOAD_FORMAT = "01"
STATIC_INITIATION = "11"
MERCHANT_CATEGORY = "0000"
CURRENCY_BRL = "986"
COUNTRY_BR = "BR"

# Checksum field id + fixed length, hashed before the checksum exists.
CRC_PREFIX = ID_CRC + "04"

MERCHANT_NAME_MAX = 25
MERCHANT_CITY_MAX = 15
TRANSACTION_ID_MAX = 25
FIELD_VALUE_MAX = 99

DEFAULT_MERCHANT_NAME = "ESTABELECIMENTO"
DEFAULT_MERCHANT_CITY = "SAO PAULO"
DEFAULT_TRANSACTION_ID = "***"

BR_COUNTRY_CODE = "55"
DEFAULT_AREA_CODE = "11"  # São Paulo
MOBILE_PREFIX = "9"
