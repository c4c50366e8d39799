from .differences import (
    Difference,
    ElementInformation,
    NodeAttributes,
    NodeName,
    NodeText,
    NodeType,
    NotPresent,
)
