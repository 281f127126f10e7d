"""Methods for reading app package containers

A package starts with a fixed-size header followed by a zip archive. Runtime
packages have a longer header, marked by a magic value, and their archive is
encrypted with the stream cipher in the crypto module.
"""

import logging
import os

from . import constants
from .crypto import *
from .. import archive
from ..errors import *
from ..util import *

logger = logging.getLogger(__name__)

NavxHeader = Struct('NavxHeader', [
 ('...', constants.headerSize),
 ('magic', Struct.STR % (constants.runtimeHeaderSize - constants.headerSize)),
])

def isRuntimePackage(data):
 """Checks the magic value at the end of the header of the supplied package data"""
 if len(data) < NavxHeader.size:
  raise HeaderError('Package header truncated: %d of %d bytes' % (len(data), NavxHeader.size))
 return NavxHeader.unpack(data).magic == constants.runtimeHeaderMagic

def isRuntimePackageFile(file):
 """Like isRuntimePackage, but only reads the header from an open binary file"""
 pos = file.tell()
 data = file.read(NavxHeader.size)
 file.seek(pos, os.SEEK_SET)
 return isRuntimePackage(data)

def decryptData(data):
 """Decrypts the archive of a runtime package"""
 cipher = StreamCipher(createKeySchedule())
 return b''.join(cipher.process(c) for c in chunk(data, constants.chunkSize))

def parse(data):
 """Parses an app package

 Returns:
  ('zip data', 'True if trailing data was stripped from the zip')
 """
 if isRuntimePackage(data):
  logger.debug('Runtime package, decrypting %d bytes', len(data) - constants.runtimeHeaderSize)
  zipData = decryptData(data[constants.runtimeHeaderSize:])
 else:
  logger.debug('Regular package')
  zipData = data[constants.headerSize:]
 return archive.stripTrailingData(zipData)

def parseFile(filename):
 """Reads and parses an app package from disk"""
 with open(filename, 'rb') as f:
  return parse(f.read())
