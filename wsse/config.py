#!/usr/bin/env python3
"""
Credential configuration
Reads WSSE_USERNAME / WSSE_PASSWORD from the environment or a .env file
"""

import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Sample credentials; set WSSE_USERNAME / WSSE_PASSWORD for real use
DEFAULT_USERNAME = 'wsapi3_user'
DEFAULT_PASSWORD = 'wsapi3_pass'


def get_credentials():
    """
    Resolve the credential pair
    Returns: (username, password)
    """
    username = os.getenv('WSSE_USERNAME', DEFAULT_USERNAME)
    password = os.getenv('WSSE_PASSWORD', DEFAULT_PASSWORD)
    return username, password
