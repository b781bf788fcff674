"""Application identity and AppConfig-backed settings

Identity comes from the environment: `APP_NAME` and `APP_ENV` together form the
key prefix of every record the application writes. Backend settings come from
one **AWS AppConfig** JSON document per environment:

    {
        "build": 7,
        "active_backend": "redis",
        "configs": {
            "paste_lifecycle": {
                "redis": {"host": "...", "port": 6379, "db": 0},
                "lifecycle": {"shortcode_length": 8, "max_write_retries": null}
            }
        }
    }

load_config() returns a single component's view of that document, i.e. the
active backend's settings plus its optional "lifecycle" settings.

Sources, first match wins:
    1. A local AppConfig agent, when running locally and APPCONFIG_AGENT_URL is set.
    2. AWS AppConfig through boto3 ('appconfigdata'), identified by
       APPCONFIG_APP_ID / APPCONFIG_ENV_ID / APPCONFIG_PROFILE_ID.

Example:
    >>> os.environ['APP_NAME'], os.environ['APP_ENV'] = 'cloudpaste', 'dev'
    >>> app_prefix()
    'cloudpaste:dev'
    >>> config = load_config('paste_lifecycle')
    >>> config['backend'], config['redis']['port']
    ('redis', 6379)
"""

import os
import json
import logging
import urllib.parse
import urllib.request

import boto3

from cloudpaste.constants import ENV
from cloudpaste.exceptions import AppConfigError, BadConfigurationError
from cloudpaste.types import AppConfigDocument, ComponentConfig
from cloudpaste.utils.helpers import require_environment
from cloudpaste.utils.runtime import running_locally


logger = logging.getLogger(__name__)

LOCAL_AGENT_HOSTS = frozenset({'localhost', '127.0.0.1', 'host.docker.internal'})
LOCAL_AGENT_PORT = 2772
DEFAULT_PROFILE_NAME = 'backend-config'


def app_env() -> str:
    """APP_ENV in lowercase, 'local' when unset"""
    return os.environ.get(ENV.App.APP_ENV, 'local').lower()


def app_name() -> str | None:
    return os.environ.get(ENV.App.APP_NAME)


def app_prefix() -> str | None:
    """Key prefix '<app name>:<app env>', or None without APP_NAME (un-prefixed keys)"""
    name = app_name()
    return None if name is None else f'{name}:{app_env()}'


def extract_component_config(document: AppConfigDocument, component: str) -> ComponentConfig:
    """Reduce a full AppConfig document to one component's settings

    Returns:
        dict: {'backend': <active backend>, <active backend>: {...}, 'lifecycle': {...}}

    Raises:
        AppConfigError:
            If the document lacks the active backend or the component's section.
    """
    try:
        backend = document['active_backend']
        section = document['configs'][component]
        return {
            'backend': backend,
            backend: section[backend],
            'lifecycle': section.get('lifecycle', {}),
        }
    except (KeyError, TypeError) as e:
        raise AppConfigError(f"AppConfig document has no '{component}' configuration for the active backend.") from e


def _local_agent_url() -> str | None:
    """Base URL of the local AppConfig agent, or None if it shouldn't be used

    Raises:
        BadConfigurationError:
            If APPCONFIG_AGENT_URL points anywhere but a local agent.
    """
    url = os.getenv(ENV.AppConfig.AGENT_URL)
    if not url or not running_locally():
        return None

    parts = urllib.parse.urlparse(url)
    if parts.scheme not in {'http', 'https'} or parts.hostname not in LOCAL_AGENT_HOSTS or parts.port not in {LOCAL_AGENT_PORT, None}:
        raise BadConfigurationError(f'{ENV.AppConfig.AGENT_URL} must point to a local AppConfig agent (given value: {url}).')
    return url.rstrip('/')


def _fetch_from_agent(agent_url: str) -> AppConfigDocument:
    profile_name = os.getenv(ENV.AppConfig.PROFILE_NAME, DEFAULT_PROFILE_NAME)
    url = f'{agent_url}/applications/{app_name()}/environments/{app_env()}/configurations/{profile_name}'
    with urllib.request.urlopen(url, timeout=5) as response:  # noqa: S310
        return json.load(response)


@require_environment(ENV.AppConfig.APP_ID, ENV.AppConfig.ENV_ID, ENV.AppConfig.PROFILE_ID)
def _fetch_from_appconfig() -> AppConfigDocument:
    client = boto3.client('appconfigdata')
    token = client.start_configuration_session(
        ApplicationIdentifier=os.environ[ENV.AppConfig.APP_ID],
        EnvironmentIdentifier=os.environ[ENV.AppConfig.ENV_ID],
        ConfigurationProfileIdentifier=os.environ[ENV.AppConfig.PROFILE_ID],
    )['InitialConfigurationToken']
    payload = client.get_latest_configuration(ConfigurationToken=token)['Configuration'].read()
    return json.loads(payload)


def load_config(component: str) -> ComponentConfig:
    """Load one component's settings from AppConfig

    Args:
        component (str):
            Section under "configs", e.g. "paste_lifecycle".

    Returns:
        dict: {'backend': <name>, <name>: {...}, 'lifecycle': {...}}

    Raises:
        MissingEnvironmentVariableError:
            If AWS AppConfig is the source and an APPCONFIG_* identifier is not set.
        BadConfigurationError:
            If APPCONFIG_AGENT_URL isn't a local agent URL.
        AppConfigError:
            If the document doesn't contain the component's configuration.
        botocore.exceptions.ClientError:
            If AWS AppConfig rejects the request.
    """
    agent_url = _local_agent_url()
    if agent_url is not None:
        source, document = 'local agent', _fetch_from_agent(agent_url)
    else:
        source, document = 'AWS AppConfig', _fetch_from_appconfig()

    config = extract_component_config(document, component)
    logger.debug('Loaded AppConfig.', extra={'component': component, 'source': source, 'build': document.get('build')})
    return config
