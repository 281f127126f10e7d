"""Helpers to describe binary layouts and to walk over byte strings"""

import struct
from collections import namedtuple

def chunk(data, size):
 """Splits a byte string in chunks of the given size"""
 return (data[i:i+size] for i in range(0, len(data), size))

class Struct(object):
 LITTLE_ENDIAN = '<'
 BIG_ENDIAN = '>'
 PADDING = '%dx'
 STR = '%ds'
 INT32 = 'I'
 INT16 = 'H'

 def __init__(self, name, fields, byteorder=LITTLE_ENDIAN):
  self.tuple = namedtuple(name, (n for n, fmt in fields if not isinstance(fmt, int)))
  self.format = byteorder + ''.join(self.PADDING % fmt if isinstance(fmt, int) else fmt for n, fmt in fields)
  self.size = struct.calcsize(self.format)

 def unpack(self, data, offset = 0):
  return self.tuple(*struct.unpack_from(self.format, data, offset))

 def pack(self, **kwargs):
  return struct.pack(self.format, *self.tuple(**kwargs))
