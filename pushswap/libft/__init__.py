"""Character, string, memory, output and printf-style formatting helpers."""