"""
OpenAPI schema customizations for drf-spectacular.

This module provides a postprocessing hook that groups operations by
function for ReDoc/Swagger UI.

Tag naming follows the pattern: [App Name] - [Group Name]
Examples:
- Auth (register, login)
- Chat - Chats (create chat, latest chats)
- Chat - Members (list chat members)
- Chat - Messages (send message)
- Chat - Search (user search)
"""

# Operation ID prefix -> tag, checked in order
OPERATION_TAGS = (
    ("auth_", "Auth"),
    ("chats_members_", "Chat - Members"),
    ("chats_messages_", "Chat - Messages"),
    ("chats_", "Chat - Chats"),
    ("search_", "Chat - Search"),
)

TAG_DESCRIPTIONS = {
    "Auth": "Account registration and bearer-token login.",
    "Chat - Chats": "Group chat creation and the latest message of every chat the caller belongs to.",
    "Chat - Members": "Membership listing, restricted to members of the chat.",
    "Chat - Messages": "Posting messages to a chat the caller belongs to.",
    "Chat - Search": "Finding users by name to add to a chat.",
}


def group_endpoints(result, generator, request, public):
    """
    Postprocessing hook to group API endpoints by function.

    Operations that already carry an explicit tag from @extend_schema keep
    it; everything else is tagged from its operation ID prefix.
    """
    paths = result.get("paths", {})

    for path, methods in paths.items():
        for method, operation in methods.items():
            if not isinstance(operation, dict):
                continue

            tags = operation.get("tags") or []
            if any(tag in TAG_DESCRIPTIONS for tag in tags):
                continue

            operation_id = operation.get("operationId", "")
            for prefix, tag in OPERATION_TAGS:
                if operation_id.startswith(prefix):
                    operation["tags"] = [tag]
                    break

    # Add tag descriptions for better documentation
    result["tags"] = [
        {"name": name, "description": description}
        for name, description in TAG_DESCRIPTIONS.items()
    ]

    return result
