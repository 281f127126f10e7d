headerSize = 40
runtimeHeaderSize = 48
runtimeHeaderMagic = b'.NEA\x00\x00\x00\x01'

keySource = b'\x0f\x0b\x51\x89\xb8\x78'
chunkSize = 81920
