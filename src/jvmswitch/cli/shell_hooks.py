"""Shell integration source emitted by `jvmswitch init`.

Each hook defines a `jvmswitch` shell function that runs the real executable,
captures the install path it prints and exports it. Subcommands that print
for humans bypass the capture. A directory-change hook then runs
`jvmswitch auto --quiet` so entering a project switches runtimes silently.
"""

from jvmswitch.core.shell import SUPPORTED_SHELLS

COMMAND_NAME = "jvmswitch"

# Subcommands whose stdout is for the user, not a path to export
PASSTHROUGH_ARGS = ("list", "init", "config", "-h", "--help", "--version")


def _render_posix_wrapper(env_var: str) -> str:
    patterns = "|".join(['""', *PASSTHROUGH_ARGS])
    return f"""{COMMAND_NAME}() {{
  case "${{1-}}" in
    {patterns})
      command {COMMAND_NAME} "$@"
      return $?
      ;;
  esac
  local __jvmswitch_path
  __jvmswitch_path="$(command {COMMAND_NAME} "$@")" || return $?
  if [ -n "$__jvmswitch_path" ]; then
    export {env_var}="$__jvmswitch_path"
  fi
}}

__jvmswitch_auto() {{
  {COMMAND_NAME} auto --quiet
}}
"""


def render_bash_hook(env_var: str) -> str:
    """Render bash integration; bash has no chpwd hook, so PROMPT_COMMAND tracks $PWD."""
    return f"""# {COMMAND_NAME} shell integration for bash
{_render_posix_wrapper(env_var)}
__jvmswitch_prompt() {{
  if [ "$PWD" != "${{__jvmswitch_last_pwd-}}" ]; then
    __jvmswitch_last_pwd="$PWD"
    __jvmswitch_auto
  fi
}}

case ";${{PROMPT_COMMAND-}};" in
  *";__jvmswitch_prompt;"*) ;;
  *) PROMPT_COMMAND="__jvmswitch_prompt${{PROMPT_COMMAND:+;$PROMPT_COMMAND}}" ;;
esac
"""


def render_zsh_hook(env_var: str) -> str:
    return f"""# {COMMAND_NAME} shell integration for zsh
{_render_posix_wrapper(env_var)}
autoload -Uz add-zsh-hook
add-zsh-hook chpwd __jvmswitch_auto
__jvmswitch_auto
"""


def render_fish_hook(env_var: str) -> str:
    patterns = " ".join(["''", *PASSTHROUGH_ARGS])
    return f"""# {COMMAND_NAME} shell integration for fish
function {COMMAND_NAME}
    switch "$argv[1]"
        case {patterns}
            command {COMMAND_NAME} $argv
            return $status
    end
    set -l __jvmswitch_path (command {COMMAND_NAME} $argv)
    or return $status
    if test -n "$__jvmswitch_path"
        set -gx {env_var} $__jvmswitch_path
    end
end

function __jvmswitch_auto --on-variable PWD
    {COMMAND_NAME} auto --quiet
end

__jvmswitch_auto
"""


def render_shell_hook(shell: str, env_var: str) -> str:
    """Render integration source for one of SUPPORTED_SHELLS.

    Raises:
        ValueError: If the shell is not supported
    """
    match shell:
        case "bash":
            return render_bash_hook(env_var)
        case "zsh":
            return render_zsh_hook(env_var)
        case "fish":
            return render_fish_hook(env_var)
        case _:
            supported = ", ".join(SUPPORTED_SHELLS)
            raise ValueError(f"Unsupported shell {shell!r}; expected one of {supported}")
