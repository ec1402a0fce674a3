UAP_NS = 'http://schemas.microsoft.com/appx/manifest/uap/windows10'
WIN81_NS = 'http://schemas.microsoft.com/appx/2013/manifest'

UAP_ATTRIBUTES = {
    'DisplayName': 'Sample App',
    'Description': 'A sample application',
    'Square150x150Logo': r'Assets\Square150x150Logo.png',
    'Square44x44Logo': r'Assets\Square44x44Logo.png',
    'BackgroundColor': '#1E90FF',
}


def manifest_xml(applications: str, ns: str = UAP_NS) -> str:
    return f'''<?xml version="1.0" encoding="utf-8"?>
<Package xmlns="http://schemas.microsoft.com/appx/manifest/foundation/windows10"
         xmlns:uap="{ns}">
  <Identity Name="Sample.App" Publisher="CN=Sample" Version="1.0.0.0" />
  <Applications>
    {applications}
  </Applications>
</Package>
'''


def application(attributes: dict[str, str], app_id: str = 'App') -> str:
    attrs = ' '.join(f'{name}="{value}"' for name, value in attributes.items())
    return f'''<Application Id="{app_id}" Executable="{app_id}.exe">
      <uap:VisualElements {attrs} />
    </Application>'''
