VERSION = (0, 3, 0)
VERSION_STR = f"{VERSION[0]}.{VERSION[1]}.{VERSION[2]}{'-' +  str(VERSION[-1]) if len(VERSION) > 3 else ''}"

ARGV0 = "pdargs"
DESCRIPTION = "A tiny command-line argument tokenizer with typed, consume-once lookups"
