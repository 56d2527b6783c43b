# When set, a strip that ends without an end-of-information code raises
# LZWTruncatedStreamError instead of returning the partial output.
STRICT = False
