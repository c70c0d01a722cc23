# Field widths (bytes)
MAGIC_SIZE = 4
U64_SIZE = 8
U16_SIZE = 2
U8_SIZE = 1

CIFF_MAGIC = b"CIFF"
CAFF_MAGIC = b"CAFF"

CAPTION_DELIMITER = b"\n"
TAG_DELIMITER = b"\0"

# magic + header_size, content_size, width, height + caption terminator
FIXED_CIFF_HEADER_OVERHEAD = MAGIC_SIZE + 4 * U64_SIZE + len(CAPTION_DELIMITER)

# magic + header_size + num_animations
CAFF_HEADER_SIZE = MAGIC_SIZE + 2 * U64_SIZE

# block_id + block_length
BLOCK_PREFIX_SIZE = U8_SIZE + U64_SIZE

# year + month, day, hour, minute + creator_length
CREDITS_FIXED_SIZE = U16_SIZE + 4 * U8_SIZE + U64_SIZE

BYTES_PER_PIXEL = 3  # RGB
