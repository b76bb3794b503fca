"""Output templates for the command interface."""

ADDED_COMPUTER = "Added computer with id: {id}."
ADDED_COMPONENT = "Added component {kind} with id {id} in computer with id {computer_id}."
REMOVED_COMPONENT = "Removed component {kind} with id {id}."
ADDED_PERIPHERAL = "Added peripheral {kind} with id {id} in computer with id {computer_id}."
REMOVED_PERIPHERAL = "Removed peripheral {kind} with id {id}."
NO_COMPUTERS = "No computers registered."

INVALID_ARGUMENTS = "Invalid arguments for {command}."
UNKNOWN_COMMAND = "Unknown command: {command}."
