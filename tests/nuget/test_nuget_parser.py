import pytest

from nugetconf.nuget.parser import NuGetConfigParser, ParseError


@pytest.mark.unit
def test_parse_text_skips_entries_without_key(sources_config_text):
    document = NuGetConfigParser().parse_text(sources_config_text)

    assert [s.feed_name for s in document.sources] == [
        "NameOnly", "SourceName", "SourceCredentials"
    ]
    assert document.sources[0].feed_uri is None
    assert document.has_sources_section is True


@pytest.mark.unit
def test_addressable_sources_exclude_malformed(sources_config_text):
    document = NuGetConfigParser().parse_text(sources_config_text)

    sources = document.addressable_sources()
    assert len(sources) == 2
    assert sources[0].feed_name == "SourceName"
    assert sources[0].feed_uri == "http://source/"
    assert sources[1].feed_name == "SourceCredentials"
    assert sources[1].feed_uri == "http://credentials"


@pytest.mark.unit
def test_parse_text_reads_credentials(sources_config_text):
    document = NuGetConfigParser().parse_text(sources_config_text)

    assert document.has_credentials_section is True
    assert len(document.credentials) == 1
    credential = document.credentials[0]
    assert credential.owner_tag == "SourceCredentials"
    assert credential.username == "foo"
    assert credential.clear_text_password == "bar"


@pytest.mark.unit
def test_parse_text_empty_configuration():
    document = NuGetConfigParser().parse_text("<configuration/>")

    assert document.sources == []
    assert document.credentials == []
    assert document.has_sources_section is False
    assert document.has_credentials_section is False


@pytest.mark.unit
def test_parse_pretty_printed_file_with_declaration(fixture_path):
    text = (fixture_path / "nuget_sources.config").read_text(encoding="utf-8")

    document = NuGetConfigParser().parse_text(text)

    assert document.clear_inherited_sources is True
    assert document.sources[0].extra_attributes == {"protocolVersion": "3"}
    assert document.sources[1].feed_name == "Internal Feed"

    credential = document.credentials[0]
    assert credential.owner_tag == "Internal_x0020_Feed"
    assert credential.clear_text_password == "p&ss<word>"

    assert [e.tag for e in document.extra_elements] == ["config"]


@pytest.mark.unit
def test_parse_keeps_unknown_credential_settings():
    text = (
        '<configuration><packageSourceCredentials><Feed>'
        '<add key="Username" value="u"/>'
        '<add key="Password" value="encrypted"/>'
        '<add key="ValidAuthenticationTypes" value="basic"/>'
        '</Feed></packageSourceCredentials></configuration>'
    )

    credential = NuGetConfigParser().parse_text(text).credentials[0]

    assert credential.username == "u"
    assert credential.clear_text_password is None
    assert credential.extra_settings == {
        "Password": "encrypted",
        "ValidAuthenticationTypes": "basic",
    }


@pytest.mark.unit
@pytest.mark.parametrize("text", [
    "",
    "   ",
    "<configuration>",
    "<configuration><packageSources></configuration>",
    "not xml at all",
])
def test_parse_text_malformed_xml_raises(text):
    with pytest.raises(ParseError):
        NuGetConfigParser().parse_text(text)


@pytest.mark.unit
def test_parse_text_wrong_root_raises():
    with pytest.raises(ParseError, match="expected 'configuration'"):
        NuGetConfigParser().parse_text("<settings/>")
