# Canned replies for the chat endpoint

from collections import namedtuple

Rule = namedtuple('Rule', ['name', 'predicate', 'respond'])

MATH_REPLY = (
    "I'll help you solve this problem!\n\n"
    "Step 1: Identify the equation\n"
    "Step 2: Apply algebraic operations\n"
    "Step 3: Simplify both sides\n"
    "Step 4: Isolate the variable\n"
    "Step 5: Check your solution\n\n"
    "For specific problems, please provide the equation clearly."
)

GREETING_REPLY = (
    "Hello! 👋 I'm MindAI, your intelligent assistant. I can help you with:\n"
    "✓ Math problem solving\n"
    "✓ Task management\n"
    "✓ General questions\n"
    "✓ Writing assistance\n\n"
    "How can I help you today?"
)

HELP_REPLY = (
    "I can help you with:\n\n"
    "1️⃣ **Math Problems**: Solve equations, algebra, geometry, calculus\n"
    "2️⃣ **Task Management**: Create and organize your to-do list\n"
    "3️⃣ **Productivity**: Help you stay organized\n"
    "4️⃣ **Writing**: Assist with emails, essays, summaries\n"
    "5️⃣ **Learning**: Explain concepts and topics\n\n"
    "What would you like help with?"
)

FALLBACK_REPLY = (
    "That's an interesting question! Based on what you asked: \"{message}\"\n\n"
    "I can provide more detailed help if you:\n"
    "• Ask me to solve a math problem\n"
    "• Help you create a task\n"
    "• Explain a concept\n"
    "• Assist with writing\n\n"
    "Feel free to ask anything specific!"
)


def contains_any(*keywords):
    """Case-insensitive substring predicate."""
    def predicate(message):
        text = message.lower()
        return any(keyword in text for keyword in keywords)
    return predicate


def fixed(reply):
    return lambda message: reply


# Evaluated in order, first match wins: "help me solve x=1" is a math question
RULES = (
    Rule('math', contains_any('solve', '='), fixed(MATH_REPLY)),
    Rule('greeting', contains_any('hello', 'hi'), fixed(GREETING_REPLY)),
    Rule('help', contains_any('help', 'what can'), fixed(HELP_REPLY)),
    Rule('fallback', lambda message: True, lambda message: FALLBACK_REPLY.format(message=message)),
)


def match(message, rules=RULES):
    for rule in rules:
        if rule.predicate(message):
            return rule
    raise LookupError(f"No rule matched {message!r}")


def classify(message, rules=RULES):
    """Name of the rule that answers ``message``."""
    return match(message, rules).name


def generate_reply(message, rules=RULES):
    return match(message, rules).respond(message)
