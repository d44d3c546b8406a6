from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .multi_agent.supervisor import Supervisor


def _node_id(prefix: str, name: str) -> str:
    return f"{prefix}_" + "".join(ch if ch.isalnum() else "_" for ch in name)


class SupervisorVisualizer:
    def __init__(self, supervisor: "Supervisor"):
        self.supervisor = supervisor

    def generate_mermaid_graph(self) -> str:
        """
        Generates a Mermaid flowchart of the supervisor, its workers and their tools.
        """
        graph = ["graph TD"]
        graph.append("    User[User] --> Supervisor[Supervisor]")
        graph.append("    Supervisor --> LLM[Model Gateway]")
        graph.append("    LLM --> Supervisor")
        for agent in self.supervisor.agents:
            agent_node = f"{_node_id('Agent', agent.name)}[{agent.name}]"
            graph.append(f"    Supervisor -->|Delegates| {agent_node}")
            graph.append(f"    {agent_node} -->|Answers| Supervisor")
            for tool in agent.tools:
                tool_node = f"{_node_id('Tool', agent.name + '_' + tool.name)}[{tool.name}]"
                graph.append(f"    {agent_node} -->|Calls| {tool_node}")
        return "\n".join(graph)
