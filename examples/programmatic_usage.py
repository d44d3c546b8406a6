import os
from dotenv import load_dotenv

# Import the necessary components
from supervisor_agent.agent import Agent
from supervisor_agent.clients.openai import OpenAIClient
from supervisor_agent.multi_agent import create_flight_assistant, create_supervisor
from supervisor_agent.multi_agent.prompts import BOOKING_SUPERVISOR_PROMPT, HOTEL_ASSISTANT_PROMPT
from supervisor_agent.tools.booking import BookHotelTool

# Load environment variables (API keys)
load_dotenv()


def main():
    # 1. Initialize the model client
    # DashScope speaks the OpenAI wire format, so the same client works for both

    # Example: Using OpenAI
    # client = OpenAIClient(model="gpt-4o")

    api_key = os.getenv("DASHSCOPE_API_KEY")
    if not api_key:
        print("Please set DASHSCOPE_API_KEY in .env")
        return

    client = OpenAIClient(
        api_key=api_key,
        model="qwen-plus",
        base_url="https://dashscope.aliyuncs.com/compatible-mode/v1",
    )

    # 2. Build the workers
    # A worker is just an Agent with a name, a prompt and its own tools
    hotel_assistant = Agent(
        name="hotel_assistant",
        client=client,
        tools=[BookHotelTool()],
        system_prompt=HOTEL_ASSISTANT_PROMPT,
        max_iterations=10,
    )
    # OR use the ready-made factory:
    flight_assistant = create_flight_assistant(client, max_iterations=10)

    # 3. Put a supervisor over them
    supervisor = create_supervisor(
        [hotel_assistant, flight_assistant],
        client,
        BOOKING_SUPERVISOR_PROMPT,
    )
    print(supervisor.visualize())

    # 4. Run a request
    query = "Book a flight from Beijing to Shanghai, then a hotel called Jin Jiang in Shanghai."
    print(f"User: {query}")

    answer = supervisor.invoke(query)
    print(f"Supervisor: {answer}")


if __name__ == "__main__":
    main()
