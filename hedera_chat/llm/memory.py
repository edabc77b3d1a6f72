from langchain.memory import ConversationBufferMemory

MEMORY_KEY = "chat_history"
INPUT_KEY = "input"
OUTPUT_KEY = "output"


def build_memory() -> ConversationBufferMemory:
    """In-process conversation buffer; turns are lost when the process exits."""
    return ConversationBufferMemory(
        memory_key=MEMORY_KEY,
        input_key=INPUT_KEY,
        output_key=OUTPUT_KEY,
        return_messages=True,
    )
