from docgraph.tools.document_relation_graph import (
    TOOL_DESCRIPTION,
    TOOL_NAME,
    execute_tool,
    get_tool_definition,
)

__all__ = ["TOOL_DESCRIPTION", "TOOL_NAME", "execute_tool", "get_tool_definition"]
