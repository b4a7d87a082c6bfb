# fsm.py - Finite State Machine for the MindAI client screens
import logging

logger = logging.getLogger(__name__)

LOGGED_OUT = "Logged Out"
LOGGED_IN = "Logged In"

CHAT_TAB = "chat"
TASKS_TAB = "tasks"
TABS = (CHAT_TAB, TASKS_TAB)


class UIStateMachine:
    """
    Finite State Machine for what the client shows

    States:
    - Logged Out: auth form, either sign in or sign up (showing_sign_up)
    - Logged In: tabbed view, either chat or tasks (active_tab)

    Events:
    - toggle_sign_up: flip between the sign in and sign up forms
    - authenticate: signup, login or a restored session succeeded
    - switch_tab: pick the chat or tasks tab, purely local
    - logout: back to the sign in form
    """

    def __init__(self):
        self.state = LOGGED_OUT
        self.showing_sign_up = False
        self.active_tab = CHAT_TAB
        self.state_history = [LOGGED_OUT]
        self.valid_transitions = {
            LOGGED_OUT: ["toggle_sign_up", "authenticate"],
            LOGGED_IN: ["switch_tab", "logout"],
        }

    @property
    def logged_in(self):
        return self.state == LOGGED_IN

    def transition(self, event, tab=None):
        """
        Transition to new state based on event

        Args:
            event: The event triggering transition
            tab: Target tab for switch_tab
        """
        current_state = self.state

        if event not in self.valid_transitions.get(self.state, []):
            logger.warning("Invalid transition: %s from state '%s'", event, self.state)
            return False

        if event == "toggle_sign_up":
            self.showing_sign_up = not self.showing_sign_up

        elif event == "authenticate":
            self.state = LOGGED_IN
            self.active_tab = CHAT_TAB

        elif event == "switch_tab":
            if tab not in TABS:
                logger.warning("Unknown tab: %r", tab)
                return False
            self.active_tab = tab

        elif event == "logout":
            self.state = LOGGED_OUT
            self.showing_sign_up = False
            self.active_tab = CHAT_TAB

        if self.state != current_state:
            self.state_history.append(self.state)
        logger.debug("%s --(%s)--> %s", current_state, event, self.describe())
        return True

    def describe(self):
        if self.logged_in:
            return f"{self.state} [{self.active_tab}]"
        return f"{self.state} [{'sign up' if self.showing_sign_up else 'sign in'}]"

