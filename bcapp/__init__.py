"""Reads app information from Business Central app packages"""

import io

from . import manifest
from . import navx
from .errors import *

def _readAppInfo(zipData, hasCertificate):
 try:
  with manifest.ManifestReader(io.BytesIO(zipData)) as reader:
   document = reader.getManifest()
  return manifest.getAppInfo(document, hasCertificate)
 except PackageError as e:
  e.hasCertificate = hasCertificate
  raise

def parseAppInfo(data):
 """Extracts the AppInfo from the raw bytes of an app package"""
 return _readAppInfo(*navx.parse(data))

def getAppInfo(filename):
 """Extracts the AppInfo from an app package file"""
 try:
  return _readAppInfo(*navx.parseFile(filename))
 except PackageError as e:
  e.filename = str(filename)
  raise
