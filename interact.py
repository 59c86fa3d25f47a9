import logging
import os

from console.prompt import Prompt
from console.reply import Reply, reply
from console.session import Session
from wordweave.engine import Dictionary
from wordweave.models import DeleteResult, UpdateResult

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "WARNING").upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger()

def env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring {name}={raw!r}, not an integer; using {default}")
        return default

def main():
    dictionary = Dictionary.open(
        os.environ.get("DICTIONARY_FILE", "Dictionary.txt"),
        suggestion_limit=env_int("SUGGESTION_LIMIT", Dictionary.MAX_SUGGESTIONS),
        debug=os.environ.get("DICTIONARY_DEBUG", "").lower() in ("1", "true", "yes"),
    )
    session = Session()
    register_commands(session, dictionary)
    logger.debug("Registered commands: %s", session.labels)
    try:
        session.run()
    finally:
        dictionary.close()

def register_commands(session: Session, dictionary: Dictionary):

    @session.command('1', 'Display Dictionary')
    def display(prompt: Prompt) -> Reply:
        lines = [f"{word}: {meaning}" for word, meaning in dictionary.entries()]
        if not lines:
            return reply("Dictionary is empty.")
        return reply("Dictionary:").text(*lines)

    @session.command('2', 'Add Word')
    def add(prompt: Prompt) -> Reply:
        word = prompt.ask("Enter word to add:")
        meaning = prompt.ask("Enter its meaning:")
        try:
            created = dictionary.add_word(word, meaning)
        except ValueError as e:
            return reply(f"Invalid entry: {e}")

        if created:
            return reply("Word added successfully.")
        return reply("Word already exists in the dictionary.", "Meaning updated successfully.")

    @session.command('3', 'Search Word')
    def search(prompt: Prompt) -> Reply:
        entry = dictionary.search(prompt.ask("Enter word to search:"))
        if entry is None:
            return reply("Word not found.")
        return reply(f"Meaning: {entry.meaning}")

    @session.command('4', 'Delete Word')
    def delete(prompt: Prompt) -> Reply:
        word = prompt.ask("Enter word to delete:")
        if word not in dictionary:
            return reply("Word not found.")

        if not prompt.confirm(f"Do you want to delete the word '{word}'?"):
            return reply("Deletion canceled.")

        result = dictionary.delete_word(word)
        if result == DeleteResult.DELETED:
            return reply("Word deleted successfully.")
        return reply("Word not found.")

    @session.command('5', 'Update Word')
    def update(prompt: Prompt) -> Reply:
        word = prompt.ask("Enter word to update:")
        entry = dictionary.search(word)
        if entry is None:
            return reply("Word not found.")

        meaning = prompt.ask(
            f"Current Word: {entry.word}, Current Meaning: {entry.meaning}\n"
            "Enter the new meaning:"
        )
        confirmed = prompt.confirm("Do you want to update the meaning of the word?")
        try:
            result = dictionary.update_word(word, meaning, confirmed)
        except ValueError as e:
            return reply(f"Invalid entry: {e}")

        if result == UpdateResult.UPDATED:
            return reply("Word updated successfully.")
        if result == UpdateResult.UNCHANGED:
            return reply("Update canceled.")
        return reply("Word not found.")

    @session.command('6', 'Suggest Words')
    def suggest(prompt: Prompt) -> Reply:
        suggestions = dictionary.suggest(prompt.ask("Enter partial term for suggestions:"))
        if not suggestions:
            return reply("No suggestions found.")
        return reply("Suggestions: " + " ".join(suggestions))

    @session.command('7', 'Save and Quit')
    def save_and_quit(prompt: Prompt) -> Reply:
        count = dictionary.save()
        return reply(f"Saved {count} words.", "Exiting program.", quit=True)


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        pass
