"""CLI commands for the Duolingo client.

Commands:
- login: Check credentials
- profile: Show profile summary
- languages: List learning languages
- skills / words / topics: Per-language progress
- related: Words related to a given word
- translate: Dictionary hints for words
- switch: Change the learning language
- keys: List cached profile keys

Credentials come from --username/--password or from the environment
variables named in configs/duolingo.yaml (DUOLINGO_USERNAME, DUOLINGO_PASSWORD).
"""

import json
from typing import NoReturn

import typer
from rich.console import Console
from rich.table import Table

from duolingo_client.api.client import DuolingoAccount, DuolingoError
from duolingo_client.config.app_config import load_client_config

app = typer.Typer(
    name="duo",
    help="Command-line access to a Duolingo account.",
    no_args_is_help=True,
)

console = Console()

UsernameOption = typer.Option(None, "--username", "-u", help="Duolingo username")
PasswordOption = typer.Option(None, "--password", "-p", help="Duolingo password")


def _fail(message: str) -> NoReturn:
    console.print(f"[red]✗ {message}[/red]")
    raise typer.Exit(code=1)


def _account(username: str | None, password: str | None) -> DuolingoAccount:
    """Build an account from CLI options, falling back to the environment."""
    config = load_client_config()
    env_username, env_password = config.get_credentials()
    username = username or env_username
    password = password or env_password
    if not username or not password:
        _fail(
            "Faltan credenciales. Usa --username/--password o define "
            f"{config.username_env} y {config.password_env}"
        )
    return DuolingoAccount(username, password, config=config)


def _logged_in(
    username: str | None,
    password: str | None,
    with_profile: bool = True,
) -> DuolingoAccount:
    """Log in and optionally fetch the profile, or exit with an error."""
    account = _account(username, password)
    try:
        account.login()
        if with_profile:
            account.fetch_profile()
    except DuolingoError as e:
        _fail(str(e))
    return account


def _print_list(items: list, empty_message: str) -> None:
    if not items:
        console.print(f"[yellow]⚠ {empty_message}[/yellow]")
        return
    for item in items:
        console.print(f"  - {item}")


@app.command()
def login(
    username: str | None = UsernameOption,
    password: str | None = PasswordOption,
) -> None:
    """Log in and report whether a session token was issued."""
    account = _logged_in(username, password, with_profile=False)
    if account.is_authenticated:
        console.print(f"[green]✓ Sesión iniciada como {account.username}[/green]")
    else:
        _fail("Login sin token de sesión (cabecera jwt ausente)")


@app.command()
def profile(
    username: str | None = UsernameOption,
    password: str | None = PasswordOption,
) -> None:
    """Show the profile summary."""
    account = _logged_in(username, password)

    table = Table(show_header=True, header_style="bold")
    table.add_column("Campo")
    table.add_column("Valor")
    for field_name, value in account.get_profile_summary_dict().items():
        if field_name == "language_data":
            value = ", ".join(account.profile.language_codes)
        table.add_row(field_name, "" if value is None else str(value))
    console.print(table)


@app.command()
def languages(
    abbr: bool = typer.Option(False, "--abbr", "-a", help="Show codes instead of names"),
    username: str | None = UsernameOption,
    password: str | None = PasswordOption,
) -> None:
    """List the languages being learned."""
    account = _logged_in(username, password)
    _print_list(account.get_learning_languages(abbreviations=abbr), "Ningún idioma en curso")


@app.command()
def skills(
    lang: str = typer.Argument(..., help="Language code, e.g. 'es'"),
    learned: bool = typer.Option(False, "--learned", "-l", help="Only learned skills"),
    username: str | None = UsernameOption,
    password: str | None = PasswordOption,
) -> None:
    """List skills for a language."""
    account = _logged_in(username, password)
    try:
        items = account.get_learned_skills(lang) if learned else account.get_skills(lang)
    except DuolingoError as e:
        _fail(str(e))

    table = Table(show_header=True, header_style="bold")
    table.add_column("Skill")
    table.add_column("Aprendida")
    table.add_column("Palabras", justify="right")
    for skill in items:
        table.add_row(
            str(skill.get("title", "")),
            "✓" if skill.get("learned") else "",
            str(len(skill.get("words") or [])),
        )
    console.print(table)


@app.command()
def words(
    lang: str = typer.Argument(..., help="Language code, e.g. 'es'"),
    username: str | None = UsernameOption,
    password: str | None = PasswordOption,
) -> None:
    """List words from learned skills."""
    account = _logged_in(username, password)
    try:
        items = account.get_learned_words(lang)
    except DuolingoError as e:
        _fail(str(e))
    _print_list(items, "Sin palabras aprendidas")


@app.command()
def topics(
    lang: str = typer.Argument(..., help="Language code, e.g. 'es'"),
    username: str | None = UsernameOption,
    password: str | None = PasswordOption,
) -> None:
    """List titles of learned skills."""
    account = _logged_in(username, password)
    try:
        items = account.get_known_topics(lang)
    except DuolingoError as e:
        _fail(str(e))
    _print_list(items, "Sin temas aprendidos")


@app.command()
def related(
    word: str = typer.Argument(..., help="Word to look up"),
    username: str | None = UsernameOption,
    password: str | None = PasswordOption,
) -> None:
    """List vocabulary entries related to a word."""
    account = _logged_in(username, password, with_profile=False)
    try:
        entries = account.get_related_words(word)
    except DuolingoError as e:
        _fail(str(e))
    _print_list(
        [entry.get("word_string") or entry.get("normalized_string") for entry in entries],
        f"Sin palabras relacionadas con '{word}'",
    )


@app.command()
def translate(
    words: list[str] = typer.Argument(..., help="Words to translate"),
    source: str | None = typer.Option(None, "--source", "-s", help="Source language code"),
    target: str | None = typer.Option(None, "--target", "-t", help="Target language code"),
    username: str | None = UsernameOption,
    password: str | None = PasswordOption,
) -> None:
    """Show dictionary hints for words."""
    account = _logged_in(username, password, with_profile=not (source and target))
    try:
        hints = account.fetch_translations(words, source=source, target=target)
    except DuolingoError as e:
        _fail(str(e))
    console.print_json(json.dumps(hints, ensure_ascii=False))


@app.command()
def switch(
    code: str = typer.Argument(..., help="Language code to switch to"),
    username: str | None = UsernameOption,
    password: str | None = PasswordOption,
) -> None:
    """Switch the learning language."""
    account = _logged_in(username, password, with_profile=False)
    try:
        account.switch_learning_language(code)
    except DuolingoError as e:
        _fail(str(e))
    console.print(f"[green]✓ Idioma cambiado a {code}[/green]")


@app.command()
def keys(
    username: str | None = UsernameOption,
    password: str | None = PasswordOption,
) -> None:
    """List the top-level keys of the profile payload."""
    account = _logged_in(username, password)
    _print_list(account.get_cached_profile_keys(), "Perfil vacío")


if __name__ == "__main__":
    app()
