import xml.etree.ElementTree as ET
from typing import Optional, List

from pydantic import Field

from . import MetaBase, MetadataParseError


class NeoForgeMavenMetadata(MetaBase):
    """
    <metadata>
      <groupId>net.neoforged</groupId>
      <artifactId>neoforge</artifactId>
      <versioning>
        <latest>21.1.77</latest>
        <release>21.1.77</release>
        <versions>
          <version>20.2.3-beta</version>
          ...
        </versions>
      </versioning>
    </metadata>
    """

    group_id: Optional[str] = Field(None, alias="groupId")
    artifact_id: Optional[str] = Field(None, alias="artifactId")
    latest: Optional[str] = None
    release: Optional[str] = None
    versions: List[str] = Field([])

    @classmethod
    def parse_xml(cls, xml_text: str):
        try:
            root = ET.fromstring(xml_text)
        except ET.ParseError as e:
            raise MetadataParseError(str(e)) from e

        if root.tag != "metadata":
            raise MetadataParseError("Unexpected root element <%s>" % root.tag)
        versioning = root.find("versioning")
        if versioning is None or versioning.find("versions") is None:
            raise MetadataParseError("No versioning/versions section in maven metadata")

        # document order is kept, the maven repository lists versions oldest first
        return cls(
            group_id=root.findtext("groupId"),
            artifact_id=root.findtext("artifactId"),
            latest=versioning.findtext("latest"),
            release=versioning.findtext("release"),
            versions=[
                (node.text or "").strip() for node in versioning.findall("versions/version")
            ],
        )
