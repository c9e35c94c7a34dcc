#!/usr/bin/env python3
"""
WS-Security Header Rendering
Builds the <soapenv:Header> block carrying a UsernameToken with a
PasswordDigest, Base64 nonce and wsu:Created timestamp
"""

from xml.sax.saxutils import escape

from wsse.common.utils import RandomSource, b64, current_timestamp, generate_nonce
from wsse.crypto.digest import compute_digest

WSSE_NS = 'http://docs.oasis-open.org/wss/2004/01/oasis-200401-wss-wssecurity-secext-1.0.xsd'
WSU_NS = 'http://docs.oasis-open.org/wss/2004/01/oasis-200401-wss-wssecurity-utility-1.0.xsd'
PASSWORD_DIGEST_TYPE = (
    'http://docs.oasis-open.org/wss/2004/01/'
    'oasis-200401-wss-username-token-profile-1.0#PasswordDigest'
)
BASE64_ENCODING_TYPE = (
    'http://docs.oasis-open.org/wss/2004/01/'
    'oasis-200401-wss-soap-message-security-1.0#Base64Binary'
)

HEADER_TEMPLATE = (
    '<soapenv:Header>\n'
    '\t<wsse:Security xmlns:wsse="{wsse_ns}">\n'
    '\t\t<wsse:UsernameToken>\n'
    '\t\t\t<wsse:Username>{username}</wsse:Username>\n'
    '\t\t\t<wsse:Password Type="{password_type}">{password_digest}</wsse:Password>\n'
    '\t\t\t<wsse:Nonce EncodingType="{encoding_type}">{nonce}</wsse:Nonce>\n'
    '\t\t\t<wsu:Created xmlns:wsu="{wsu_ns}">{created}</wsu:Created>\n'
    '\t\t</wsse:UsernameToken>\n'
    '\t</wsse:Security>\n'
    '</soapenv:Header>'
)


def fill_header(username, password_digest_b64, nonce_b64, created):
    """
    Fill the header template
    The username is XML-escaped; the other fields are Base64 or dateTime text
    """
    return HEADER_TEMPLATE.format(
        wsse_ns=WSSE_NS,
        wsu_ns=WSU_NS,
        password_type=PASSWORD_DIGEST_TYPE,
        encoding_type=BASE64_ENCODING_TYPE,
        username=escape(username, {'"': '&quot;'}),
        password_digest=password_digest_b64,
        nonce=nonce_b64,
        created=created,
    )


def render_header(username, password, random_source=None, clock=None):
    """
    Generate nonce and timestamp, compute the digest and render the header
    Returns: header XML text
    """
    if random_source is None:
        random_source = RandomSource()

    nonce = generate_nonce(random_source)
    # Captured once: the digest and wsu:Created must carry the same string
    created = current_timestamp(clock)
    digest = compute_digest(nonce, created, password)
    return fill_header(username, b64(digest), b64(nonce), created)
