"""
Domain models for the Hedera Agent Kit.

This package contains the context, result and parameter models passed
between plugins, tools and execution strategies.
"""

from hedera_agent_kit.domains.enums import *
from hedera_agent_kit.domains.context import *
from hedera_agent_kit.domains.results import *
from hedera_agent_kit.domains.exceptions import *
