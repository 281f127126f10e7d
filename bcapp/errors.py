"""Errors raised while reading app packages"""

class PackageError(Exception):
 """Base class of all app package errors

 Attributes:
  filename: The package the error occurred in, if known
  hasCertificate: Whether trailing signature data had been stripped before the error
 """
 filename = None
 hasCertificate = False

 def __str__(self):
  message = super(PackageError, self).__str__()
  if self.filename is not None:
   return '%s: %s' % (self.filename, message)
  return message

class HeaderError(PackageError, IOError):
 """The package is shorter than its fixed-size header"""

class ArchiveError(PackageError):
 """The decoded payload is not a readable zip archive"""

class ManifestNotFoundError(PackageError):
 """The archive has no manifest entry"""

class ManifestParseError(PackageError):
 """The manifest is not well-formed XML"""

class ManifestSchemaError(PackageError):
 """The manifest does not have the expected structure"""
