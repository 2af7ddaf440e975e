# Common utilities
from clustercert.common.config import Config as Config
from clustercert.common.logging_utils import setup_logger as setup_logger
from clustercert.common.models import IssueOptions as IssueOptions
from clustercert.common.models import SubjectAltNames as SubjectAltNames

__all__ = ["Config", "IssueOptions", "SubjectAltNames", "setup_logger"]
