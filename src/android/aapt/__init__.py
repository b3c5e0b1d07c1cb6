"""
aapt command builders.

Builders assemble the argv for one aapt invocation; AaptExecutor runs it.
"""

from src.android.aapt.base import AaptCommandBuilder
from src.android.aapt.capabilities import GenerateSourcesCommandBuilder, LinkCommandBuilder
from src.android.aapt.executor import AaptExecutor, AaptResult
from src.android.aapt.package import Aapt1PackageCommandBuilder

__all__ = [
    # Builders
    "AaptCommandBuilder",
    "Aapt1PackageCommandBuilder",
    # Capabilities
    "GenerateSourcesCommandBuilder",
    "LinkCommandBuilder",
    # Execution
    "AaptExecutor",
    "AaptResult",
]
