#!/usr/bin/env python3
# %% [markdown]
# # Stepper — Interactive Demo
#
# Walks through a sign-up wizard built on ``Stepper``: starting, advancing,
# rewinding, editing the step list mid-run, rejecting, and compiling.
# Run the cells top to bottom.

# %%
import logging

from stepper import SequenceExhausted, Stepper, sequence

logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


# %% [markdown]
# ## Step Definitions
#
# A step is any callable ``(step, payload, is_last)``.  ``step`` is the
# navigation context: ``next``, ``prev``, ``remove``, ``reject``,
# ``insert_after``, ``insert_before``.


# %%
def ask_email(step, form, is_last):
    print(f"    [ask_email] {form}")
    if "@" not in form.get("email", ""):
        step.reject({**form, "error": "invalid email"})
        return
    step.next(form)


def ask_plan(step, form, is_last):
    print(f"    [ask_plan]  {form}")
    if form.get("plan") == "team":
        step.insert_after(ask_seats)
    step.next(form)


def ask_seats(step, form, is_last):
    print(f"    [ask_seats] {form}")
    step.next({**form, "seats": 5})


def confirm(step, form, is_last):
    print(f"    [confirm]   {form} (last={is_last})")


# %% [markdown]
# ## Run to completion

# %%
wizard = Stepper([ask_email, ask_plan, confirm], on_reject=lambda f: print(f"  rejected: {f}"))
wizard.start({"email": "ada@example.com", "plan": "team"})
print(wizard.snapshot().model_dump())

# %% [markdown]
# ## Rewind and re-run
#
# ``prev`` only moves the cursor; the following ``next`` re-executes.

# %%
wizard.prev(2)
print(f"  rewound to {wizard.current!r}")
wizard.next({"email": "ada@example.com", "plan": "solo", "seats": 9})

try:
    wizard.next()
except SequenceExhausted as exc:
    print(f"  {exc}")

# %% [markdown]
# ## Rejection

# %%
wizard.start({"email": "nope"})

# %% [markdown]
# ## Compiled chain
#
# ``compile()`` freezes the current actions.  Edits to ``wizard`` afterwards
# do not change ``chain``.

# %%
chain = wizard.compile()
wizard.remove(wizard.get_at(0))
chain({"email": "grace@example.com", "plan": "solo"})

standalone = sequence([ask_email, confirm])
standalone({"email": "linus@example.com"})
