# SSZ merkleization works over fixed 32-byte chunks.
BYTES_PER_CHUNK = 32

# Length leaf of a variable-length list: a uint256 mixed in next to the data root.
LENGTH_IDENT = "len"
LENGTH_LEAF_SIZE = 32

# Width of the native word-sized counter type ("usize").
USIZE_BITS = 64
