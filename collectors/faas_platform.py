"""
Classifies the hosting FaaS provider from the `env` command's output.
First matching marker wins; anything else is reported as "Unknown Platform".
"""

import logging
from typing import Callable, Dict, List

from collectors.sources import CommandResult, run_command
from probe.attributes import AttributeStore

logger = logging.getLogger(__name__)

UNKNOWN_PLATFORM = "Unknown Platform"
AWS_LAMBDA = "AWS Lambda"

# (substring of env output, platform name), in priority order
PLATFORM_MARKERS = (
    ("AWS_LAMBDA", AWS_LAMBDA),
    ("X_GOOGLE", "Google Cloud Functions"),
    ("functions.cloud.ibm", "IBM Cloud Functions"),
    ("microsoft.com/azure-functions", "Azure Functions"),
)

# env var -> (attribute key, cast)
AWS_FUNCTION_FIELDS = {
    "AWS_LAMBDA_FUNCTION_NAME": ("functionName", str),
    "AWS_LAMBDA_FUNCTION_MEMORY_SIZE": ("functionMemory", int),
    "AWS_REGION": ("functionRegion", str),
    "AWS_LAMBDA_LOG_STREAM_NAME": ("logStreamName", str),
}


def detect_platform(env_text: str) -> str:
    for marker, name in PLATFORM_MARKERS:
        if marker in env_text:
            return name
    return UNKNOWN_PLATFORM


def parse_env(env_text: str) -> Dict[str, str]:
    """Parse `KEY=VALUE` lines; values may themselves contain '='."""
    env: Dict[str, str] = {}
    for line in env_text.splitlines():
        if "=" in line:
            k, v = line.split("=", 1)
            if k:
                env[k] = v
    return env


class PlatformCollector:
    """Records `platform` and, on AWS Lambda, the function's metadata"""

    def __init__(
        self,
        attributes: AttributeStore,
        runner: Callable[[List[str]], CommandResult] = run_command,
    ):
        self.attributes = attributes
        self.runner = runner

    def collect(self):
        try:
            env_text = self.runner(["env"]).text
            platform = detect_platform(env_text)
            self.attributes.set("platform", platform)
            logger.debug(f"Detected platform: {platform}")

            if platform == AWS_LAMBDA:
                self._collect_aws_function(parse_env(env_text))
        except Exception as e:
            logger.error(f"Platform detection failed: {e}", exc_info=True)

    def _collect_aws_function(self, env: Dict[str, str]):
        for var, (key, cast) in AWS_FUNCTION_FIELDS.items():
            raw = env.get(var)
            if raw is None:
                continue
            try:
                self.attributes.set(key, cast(raw.strip()))
            except ValueError:
                logger.warning(f"Ignoring malformed {var}={raw!r}")
