import base64
import datetime

from wsse.common.utils import RandomSource
from wsse.crypto.digest import compute_digest
from wsse.header import fill_header, render_header

EXPECTED_HEADER = (
    '<soapenv:Header>\n'
    '\t<wsse:Security xmlns:wsse="http://docs.oasis-open.org/wss/2004/01/oasis-200401-wss-wssecurity-secext-1.0.xsd">\n'
    '\t\t<wsse:UsernameToken>\n'
    '\t\t\t<wsse:Username>alice</wsse:Username>\n'
    '\t\t\t<wsse:Password Type="http://docs.oasis-open.org/wss/2004/01/oasis-200401-wss-username-token-profile-1.0#PasswordDigest">T1+Wt849X5sCu3i4Z+7hvxekGFQ=</wsse:Password>\n'
    '\t\t\t<wsse:Nonce EncodingType="http://docs.oasis-open.org/wss/2004/01/oasis-200401-wss-soap-message-security-1.0#Base64Binary">AQEBAQEBAQEBAQEBAQEBAQ==</wsse:Nonce>\n'
    '\t\t\t<wsu:Created xmlns:wsu="http://docs.oasis-open.org/wss/2004/01/oasis-200401-wss-wssecurity-utility-1.0.xsd">2024-05-06T07:08:09.123Z</wsu:Created>\n'
    '\t\t</wsse:UsernameToken>\n'
    '\t</wsse:Security>\n'
    '</soapenv:Header>'
)


def fixed_source():
    return RandomSource(lambda n: b"\x01" * n)


def fixed_clock():
    return datetime.datetime(2024, 5, 6, 7, 8, 9, 123456, tzinfo=datetime.UTC)


def test_render_header_byte_for_byte():
    assert render_header("alice", "pw", fixed_source(), fixed_clock) == EXPECTED_HEADER


def test_header_digest_verifies_from_rendered_fields():
    header = render_header("alice", "pw", RandomSource(), fixed_clock)

    def field(open_tag_end, close_tag):
        start = header.index(open_tag_end) + len(open_tag_end)
        return header[start:header.index(close_tag, start)]

    nonce = base64.b64decode(field('#Base64Binary">', '</wsse:Nonce>'))
    created = field('utility-1.0.xsd">', '</wsu:Created>')
    digest = base64.b64decode(field('#PasswordDigest">', '</wsse:Password>'))

    assert len(nonce) == 16
    assert created == "2024-05-06T07:08:09.123Z"
    assert compute_digest(nonce, created, "pw") == digest


def test_fill_header_substitutes_fields():
    header = fill_header("bob", "DIGEST==", "NONCE==", "2020-01-01T00:00:00.000Z")
    assert "<wsse:Username>bob</wsse:Username>" in header
    assert ">DIGEST==</wsse:Password>" in header
    assert ">NONCE==</wsse:Nonce>" in header
    assert ">2020-01-01T00:00:00.000Z</wsu:Created>" in header
    assert header.startswith("<soapenv:Header>\n\t<wsse:Security ")
    assert header.endswith("\t</wsse:Security>\n</soapenv:Header>")


def test_username_is_xml_escaped():
    header = fill_header('a&b <c> "d"', "D", "N", "C")
    assert "<wsse:Username>a&amp;b &lt;c&gt; &quot;d&quot;</wsse:Username>" in header


def test_each_header_has_fresh_nonce():
    source = RandomSource()
    first = render_header("alice", "pw", source, fixed_clock)
    second = render_header("alice", "pw", source, fixed_clock)
    assert first != second


def test_render_header_with_username_and_password_only():
    header = render_header("alice", "pw")
    assert header.startswith("<soapenv:Header>\n")
    assert "<wsse:Username>alice</wsse:Username>" in header
    assert header.endswith("</soapenv:Header>")
