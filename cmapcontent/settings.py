STRICT = False

# Nibble value used for bytes outside 0-9a-fA-F in names and hex strings.
# The legacy lookup table answers -1 here.
HEX_FALLBACK_NIBBLE = 0
