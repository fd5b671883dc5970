"""
Logic:
- Read API settings from Streamlit secrets, with defaults for the public mock endpoint
- Create the shared HTTP session
- Cache the session for better performance
"""

import logging

import requests
import streamlit as st

from utils.helpers import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://jsonplaceholder.typicode.com/posts"
DEFAULT_LIST_LIMIT = 10


def get_api_settings():
    """
    Input: None
    Process: Reads the optional [api] table from Streamlit secrets and fills in defaults
    Output: Dict with base_url, timeout and list_limit
    """
    settings = {
        'base_url': DEFAULT_BASE_URL,
        'timeout': DEFAULT_TIMEOUT,
        'list_limit': DEFAULT_LIST_LIMIT,
    }
    try:
        api_config = dict(st.secrets.get("api", {}))
    except Exception as e:
        # No secrets.toml is a normal setup, the defaults apply
        logger.info("No API secrets found, using defaults: %s", e)
        api_config = {}

    if api_config.get('base_url'):
        settings['base_url'] = str(api_config['base_url']).rstrip('/')
    if 'timeout' in api_config:
        settings['timeout'] = float(api_config['timeout'])
    if 'list_limit' in api_config:
        settings['list_limit'] = int(api_config['list_limit'])
    return settings


@st.cache_resource
def get_http_session():
    """
    Input: None
    Process: Creates a requests session shared across reruns
    Output: requests.Session
    """
    session = requests.Session()
    session.headers.update({'Accept': 'application/json'})
    return session
