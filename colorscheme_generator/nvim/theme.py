MODULE_HEADER = """local M = {}

local function set_hl_groups()
    local hl = vim.api.nvim_set_hl
"""

INIT_TEMPLATE = """

end

function M.init()
    vim.cmd("hi clear")

    if vim.fn.exists("syntax_on") then
        vim.cmd("syntax reset")
    end

    vim.o.background = "{background}"
    vim.o.termguicolors = true
    vim.g.colors_name = "{name}"

"""

MODULE_FOOTER = """

    set_hl_groups()
end

return M
"""


def generate_nvim_init(theme):
    """Generate the ``lua/<name>/init.lua`` module for a compiled theme.

    Args:
        theme: Compiled Theme

    Returns:
        Lua source of the colorscheme module
    """
    parts = [MODULE_HEADER]
    parts.extend(theme.highlights)
    parts.append(INIT_TEMPLATE.format(background=theme.background, name=theme.name))
    parts.append(
        "\n".join(f'    vim.g.{key} = "{value}"' for key, value in theme.globals)
    )
    parts.append(MODULE_FOOTER)
    return "".join(parts)


def generate_colors_loader(theme_name):
    """Generate ``colors/<name>.lua``, the file ``:colorscheme`` sources."""
    return f'require("{theme_name}").init()\n'
