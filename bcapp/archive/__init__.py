"""Normalizes the end of a zip archive

Signed packages have the signature appended after the zip end of central
directory record. Zip readers reject such archives, so the trailing bytes
are cut off.
"""

import logging

from ..util import *

logger = logging.getLogger(__name__)

EocdRecord = Struct('EocdRecord', [
 ('magic', Struct.STR % 4),
 ('diskNumber', Struct.INT16),
 ('centralDirectoryDisk', Struct.INT16),
 ('numDiskEntries', Struct.INT16),
 ('numEntries', Struct.INT16),
 ('centralDirectorySize', Struct.INT32),
 ('centralDirectoryOffset', Struct.INT32),
 ('commentSize', Struct.INT16),
])
eocdMagic = b'PK\x05\x06'

def findEocd(data):
 """Returns the offset of the last end of central directory record, or -1"""
 offset = data.rfind(eocdMagic)
 if offset < 0 or len(data) - offset < EocdRecord.size:
  return -1
 return offset

def stripTrailingData(data):
 """Removes bytes following the comment of the end of central directory record

 Returns:
  ('zip data', 'True if bytes were removed')
 """
 offset = findEocd(data)
 if offset < 0:
  return data, False

 record = EocdRecord.unpack(data, offset)
 expectedCommentSize = len(data) - offset - EocdRecord.size
 if expectedCommentSize <= record.commentSize:
  return data, False

 excess = expectedCommentSize - record.commentSize
 logger.debug('Stripping %d bytes of trailing data', excess)
 return data[:len(data) - excess], True
