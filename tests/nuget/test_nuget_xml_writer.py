import pytest
from lxml import etree

from nugetconf.nuget.config_document import ConfigDocument
from nugetconf.nuget.package_source import PackageSource, SourceCredential
from nugetconf.nuget.parser import NuGetConfigParser
from nugetconf.nuget.xml_writer import NuGetConfigWriter


@pytest.mark.unit
def test_serialize_empty_document():
    assert NuGetConfigWriter().serialize(ConfigDocument()) == "<configuration/>"


@pytest.mark.unit
def test_serialize_sources_and_credentials_in_order():
    document = ConfigDocument()
    document.add_source(PackageSource("SourceName", "http://source/"))
    document.add_source(PackageSource("SourceCredentials", "http://credentials"))
    document.add_credential(SourceCredential("SourceCredentials", "foo", "bar"))

    text = NuGetConfigWriter().serialize(document)

    assert text == (
        '<configuration><packageSources>'
        '<add key="SourceName" value="http://source/"/>'
        '<add key="SourceCredentials" value="http://credentials"/>'
        '</packageSources><packageSourceCredentials><SourceCredentials>'
        '<add key="Username" value="foo"/><add key="ClearTextPassword" value="bar"/>'
        '</SourceCredentials></packageSourceCredentials></configuration>'
    )


@pytest.mark.unit
def test_emptied_credentials_section_is_self_closing():
    document = ConfigDocument(has_credentials_section=True)

    text = NuGetConfigWriter().serialize(document)

    assert text == "<configuration><packageSourceCredentials/></configuration>"


@pytest.mark.unit
def test_attribute_values_are_escaped():
    document = ConfigDocument()
    document.add_source(PackageSource("Feed", 'http://feed/?a=1&b="2"'))
    document.add_credential(SourceCredential("Feed", "user", "p<&>ss"))

    text = NuGetConfigWriter().serialize(document)

    assert "&amp;" in text
    assert "&lt;" in text
    assert "&quot;" in text

    reloaded = NuGetConfigParser().parse_text(text)
    assert reloaded.sources[0].feed_uri == 'http://feed/?a=1&b="2"'
    assert reloaded.credentials[0].clear_text_password == "p<&>ss"


@pytest.mark.unit
def test_round_trip_preserves_sources_and_credentials(fixture_path):
    parser = NuGetConfigParser()
    writer = NuGetConfigWriter()
    original = parser.parse_text((fixture_path / "nuget_sources.config").read_text())

    reloaded = parser.parse_text(writer.serialize(original))

    assert reloaded.sources == original.sources
    assert reloaded.credentials == original.credentials
    assert reloaded.clear_inherited_sources is True
    assert [e.tag for e in reloaded.extra_elements] == ["config"]


@pytest.mark.unit
def test_clear_and_extra_attributes_are_written():
    document = ConfigDocument(clear_index=0)
    document.add_source(
        PackageSource("nuget.org", "https://api.nuget.org/v3/index.json", {"protocolVersion": "3"})
    )

    root = NuGetConfigWriter().build_tree(document)

    section = root.find("packageSources")
    assert section[0].tag == "clear"
    add_elem = section[1]
    assert list(add_elem.attrib.keys()) == ["key", "value", "protocolVersion"]


@pytest.mark.unit
def test_pretty_print_output_is_indented():
    document = ConfigDocument()
    document.add_source(PackageSource("SourceName", "http://source/"))

    text = NuGetConfigWriter().serialize(document, pretty_print=True)

    assert "\n  <packageSources>" in text
    assert etree.fromstring(text).find("packageSources/add").get("key") == "SourceName"


@pytest.mark.unit
@pytest.mark.parametrize("text", [
    '<configuration><packageSources><add key="A" value="http://a/"/><clear/>'
    '<add key="B" value="http://b/"/></packageSources></configuration>',
    '<configuration><packageSources><add key="A" value="http://a/"/><clear/>'
    '</packageSources></configuration>',
    '<configuration><packageSources><clear/></packageSources></configuration>',
])
def test_clear_keeps_its_position(text):
    document = NuGetConfigParser().parse_text(text)

    assert NuGetConfigWriter().serialize(document) == text
