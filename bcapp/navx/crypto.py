"""The stream cipher used to obfuscate runtime packages (an RC4 keystream)"""

from . import constants

def createKeySchedule(key=constants.keySource):
 """Builds the 256 entry permutation table the keystream starts from"""
 table = bytearray(range(256))
 j = 0
 for i in range(256):
  j = (j + key[i % len(key)] + table[i]) & 0xff
  table[i], table[j] = table[j], table[i]
 return table

class StreamCipher(object):
 """Xors data with the keystream generated from a key schedule.

 The schedule is copied, the indices start at zero. Successive calls to
 process() continue the same keystream, so data may be fed in chunks.
 """
 def __init__(self, schedule):
  self._table = bytearray(schedule)
  self._x = 0
  self._y = 0

 def process(self, data):
  table = self._table
  x = self._x
  y = self._y
  out = bytearray(data)
  for i in range(len(out)):
   x = (x + 1) & 0xff
   y = (y + table[x]) & 0xff
   table[x], table[y] = table[y], table[x]
   out[i] ^= table[(table[x] + table[y]) & 0xff]
  self._x = x
  self._y = y
  return bytes(out)
