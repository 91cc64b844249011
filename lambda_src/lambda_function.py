# lambda_function.py
import logging

from probe.config import load_config
from probe.inspector import Inspector

logger = logging.getLogger()
logger.setLevel(logging.INFO)

# Read once per execution environment; the Inspector itself is per invocation.
CONFIG = load_config()


def handler(event, context):
    inspector = Inspector.from_config(CONFIG)
    inspector.inspect_all()

    request_id = getattr(context, "aws_request_id", None)
    if request_id:
        inspector.add_attribute("requestId", request_id)

    record = inspector.finish()
    logger.info(f"container={record.get('uuid')} new={record.get('newcontainer')} runtime={record['runtime']}ms")
    return record
