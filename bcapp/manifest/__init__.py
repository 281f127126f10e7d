"""Reads the NavxManifest.xml file describing an app"""

from collections import namedtuple
import logging
from xml.parsers.expat import ExpatError
from zipfile import BadZipFile, ZipFile
import zlib

import defusedxml
import defusedxml.minidom

from . import constants
from ..errors import *

logger = logging.getLogger(__name__)

AppInfo = namedtuple('AppInfo', 'id, name, publisher, version, applicationVersion, platform, description, brief, dependencies, hasCertificate')
DependencyInfo = namedtuple('DependencyInfo', 'id, name, publisher, version')

class ManifestReader:
 """Finds and parses the manifest in a zip archive"""
 def __init__(self, file):
  try:
   self._file = ZipFile(file)
  except (BadZipFile, UnicodeDecodeError) as e:
   raise ArchiveError('Cannot open zip file: %s' % e) from e

 def findManifest(self):
  """Returns the first entry matching the manifest name"""
  for info in self._file.infolist():
   if constants.manifestNamePattern.search(info.filename):
    logger.debug('Found manifest %s', info.filename)
    return info
  raise ManifestNotFoundError('File "%s" not found in the zip file.' % constants.manifestName)

 def readManifest(self):
  info = self.findManifest()
  try:
   return self._file.read(info)
  except (BadZipFile, EOFError, NotImplementedError, RuntimeError, zlib.error) as e:
   raise ArchiveError('Cannot read %s: %s' % (info.filename, e)) from e

 def getManifest(self):
  return parseManifest(self.readManifest())

 def close(self):
  self._file.close()

 def __enter__(self):
  return self

 def __exit__(self, *args):
  self.close()

def parseManifest(data):
 """Parses the manifest xml, returns a dom document"""
 try:
  return defusedxml.minidom.parseString(data)
 except (ExpatError, defusedxml.DefusedXmlException) as e:
  raise ManifestParseError('Cannot parse %s: %s' % (constants.manifestName, e)) from e

def _getChildren(element, name, required=False):
 children = [node for node in element.childNodes if node.nodeType == node.ELEMENT_NODE and node.localName == name]
 if required and not children:
  raise ManifestSchemaError('Element <%s> not found in %s' % (name, constants.manifestName))
 return children

def _getChild(element, name):
 return _getChildren(element, name, True)[0]

def _getAttribute(element, name):
 return element.getAttribute(name) if element.hasAttribute(name) else None

def _isPlaceholder(element):
 return not element.attributes.length

def _parseDependency(element):
 return DependencyInfo(
  id = _getAttribute(element, constants.idAttribute),
  name = _getAttribute(element, constants.nameAttribute),
  publisher = _getAttribute(element, constants.publisherAttribute),
  version = _getAttribute(element, constants.minVersionAttribute),
 )

def getDependencies(package):
 """Lists the dependencies declared by a <Package> element, skipping empty placeholders"""
 return [
  _parseDependency(element)
  for dependencies in _getChildren(package, constants.dependenciesElement, True)
  for element in _getChildren(dependencies, constants.dependencyElement)
  if not _isPlaceholder(element)
 ]

def getAppInfo(document, hasCertificate=False):
 """Maps a parsed manifest to an AppInfo tuple"""
 package = document.documentElement
 if package.localName != constants.packageElement:
  raise ManifestSchemaError('Root element of %s is <%s>, expected <%s>' % (constants.manifestName, package.localName, constants.packageElement))
 app = _getChild(package, constants.appElement)
 return AppInfo(
  id = _getAttribute(app, constants.idAttribute),
  name = _getAttribute(app, constants.nameAttribute),
  publisher = _getAttribute(app, constants.publisherAttribute),
  version = _getAttribute(app, constants.versionAttribute),
  applicationVersion = _getAttribute(app, constants.applicationAttribute),
  platform = _getAttribute(app, constants.platformAttribute),
  description = _getAttribute(app, constants.descriptionAttribute),
  brief = _getAttribute(app, constants.briefAttribute),
  dependencies = getDependencies(package),
  hasCertificate = hasCertificate,
 )
