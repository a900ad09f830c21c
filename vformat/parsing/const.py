"""Constants for the content line grammar shared by rfc5545 and rfc6350."""

PARAM_VALUE_DELIMITER = ","
VALUE_DELIMITER = ":"
PARAM_DELIMITER = ";"
PARAM_NAME_DELIMITER = "="
PARAM_QUOTE = '"'
ESCAPE_CHAR = "\\"

WSP = (" ", "\t")
LINE_BREAK = "\r\n"
FOLD_INDENT = " "
FOLD = LINE_BREAK + FOLD_INDENT
FOLD_LEN = 75
FOLD_CONTINUATION_LEN = FOLD_LEN - len(FOLD_INDENT)

ATTR_BEGIN = "BEGIN"
ATTR_END = "END"
ATTR_VALUE = "VALUE"
