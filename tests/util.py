"""Builders for the app packages used in the tests"""

import io
import struct
import zipfile

from bcapp.navx import NavxHeader, StreamCipher, constants, createKeySchedule

manifestNamespace = 'http://schemas.microsoft.com/navx/2015/manifest'

sampleApp = {
 'Id': 'abc',
 'Name': 'Foo',
 'Publisher': 'Contoso',
 'Version': '1.0.0.0',
 'Application': '18.0',
 'Platform': '18.0',
}

sampleDependency = {
 'Id': 'dep1',
 'Name': 'Base',
 'Publisher': 'Contoso',
 'MinVersion': '2.0.0.0',
}

sampleSignature = b'\x30\x82\x1d\x4a\x06\x09\x2a\x86\x48\x86\xf7\x0d\x01\x07\x02' + bytes(range(256)) * 4

def element(name, attributes={}):
 return '<%s%s />' % (name, ''.join(' %s="%s"' % item for item in attributes.items()))

def manifestXml(app=sampleApp, dependencies='<Dependencies />', namespace=manifestNamespace):
 xmlns = ' xmlns="%s"' % namespace if namespace else ''
 return ('<?xml version="1.0" encoding="utf-8"?>\n'
  '<Package%s>\n'
  '  %s\n'
  '  %s\n'
  '</Package>\n') % (xmlns, element('App', app), dependencies)

def buildZip(entries, comment=b'', compression=zipfile.ZIP_DEFLATED):
 """Builds a zip archive from a list of (name, data) tuples"""
 f = io.BytesIO()
 with zipfile.ZipFile(f, 'w', compression) as z:
  for name, data in entries:
   z.writestr(name, data)
  z.comment = comment
 return f.getvalue()

def buildAppZip(xml=None, extraEntries=[]):
 entries = [('src/Codeunit.al', 'codeunit 50100 Foo {}')] + extraEntries
 entries.append(('NavxManifest.xml', xml if xml is not None else manifestXml()))
 return buildZip(entries)

def regularHeader():
 return b'NAVX' + struct.pack('<II', constants.headerSize, 2) + b'\0' * 24 + b'NAVX'

def regularPackage(zipData):
 return regularHeader() + zipData

def encrypt(data):
 return StreamCipher(createKeySchedule(constants.keySource)).process(data)

def runtimePackage(zipData):
 header = regularHeader() + NavxHeader.pack(magic=constants.runtimeHeaderMagic)[constants.headerSize:]
 return header + encrypt(zipData)

def writeFile(path, data):
 with open(str(path), 'wb') as f:
  f.write(data)
 return path
