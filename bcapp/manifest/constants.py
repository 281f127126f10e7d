import re

manifestName = 'NavxManifest.xml'
manifestNamePattern = re.compile(re.escape(manifestName) + '$', re.IGNORECASE)

packageElement = 'Package'
appElement = 'App'
dependenciesElement = 'Dependencies'
dependencyElement = 'Dependency'

idAttribute = 'Id'
nameAttribute = 'Name'
publisherAttribute = 'Publisher'
versionAttribute = 'Version'
minVersionAttribute = 'MinVersion'
applicationAttribute = 'Application'
platformAttribute = 'Platform'
descriptionAttribute = 'Description'
briefAttribute = 'Brief'
