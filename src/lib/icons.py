"""
Inline SVG icons embedded in copyable widgets

ICON_LIST is the resting state of the copy button, ICON_CHECK is shown
after a successful copy. Both are module constants and never mutated.
"""

ICON_LIST = (
    '<svg stroke="currentColor" fill="currentColor" stroke-width="0" viewBox="0 0 24 24" '
    'aria-hidden="true" height="18" width="18" xmlns="http://www.w3.org/2000/svg">'
    '<path fill-rule="evenodd" d="M7.502 6h7.128A3.375 3.375 0 0118 9.375v9.375a3 3 0 003-3V6.108'
    'c0-1.505-1.125-2.811-2.664-2.94a48.972 48.972 0 00-.673-.05A3 3 0 0015 1.5h-1.5a3 3 0 00-2.663 '
    '1.618c-.225.015-.45.032-.673.05C8.662 3.295 7.554 4.542 7.502 6zM13.5 3A1.5 1.5 0 0012 4.5h4.5'
    'A1.5 1.5 0 0015 3h-1.5z" clip-rule="evenodd"></path>'
    '<path fill-rule="evenodd" d="M3 9.375C3 8.339 3.84 7.5 4.875 7.5h9.75c1.036 0 1.875.84 1.875 '
    '1.875v11.25c0 1.035-.84 1.875-1.875 1.875h-9.75A1.875 1.875 0 013 20.625V9.375zM6 12a.75.75 0 '
    '01.75-.75h.008a.75.75 0 01.75.75v.008a.75.75 0 01-.75.75H6.75a.75.75 0 01-.75-.75V12zm2.25 0a'
    '.75.75 0 01.75-.75h3.75a.75.75 0 010 1.5H9a.75.75 0 01-.75-.75zM6 15a.75.75 0 01.75-.75h.008a'
    '.75.75 0 01.75.75v.008a.75.75 0 01-.75.75H6.75a.75.75 0 01-.75-.75V15zm2.25 0a.75.75 0 01.75-'
    '.75h3.75a.75.75 0 010 1.5H9a.75.75 0 01-.75-.75zM6 18a.75.75 0 01.75-.75h.008a.75.75 0 01.75.75'
    'v.008a.75.75 0 01-.75.75H6.75a.75.75 0 01-.75-.75V18zm2.25 0a.75.75 0 01.75-.75h3.75a.75.75 0 '
    '010 1.5H9a.75.75 0 01-.75-.75z" clip-rule="evenodd"></path></svg>'
)

ICON_CHECK = (
    '<svg stroke="currentColor" fill="currentColor" stroke-width="0" viewBox="0 0 24 24" '
    'aria-hidden="true" height="18" width="18" xmlns="http://www.w3.org/2000/svg">'
    '<path fill-rule="evenodd" d="M7.502 6h7.128A3.375 3.375 0 0118 9.375v9.375a3 3 0 003-3V6.108'
    'c0-1.505-1.125-2.811-2.664-2.94a48.972 48.972 0 00-.673-.05A3 3 0 0015 1.5h-1.5a3 3 0 00-2.663 '
    '1.618c-.225.015-.45.032-.673.05C8.662 3.295 7.554 4.542 7.502 6zM13.5 3A1.5 1.5 0 0012 4.5h4.5'
    'A1.5 1.5 0 0015 3h-1.5z" clip-rule="evenodd"></path>'
    '<path fill-rule="evenodd" d="M3 9.375C3 8.339 3.84 7.5 4.875 7.5h9.75c1.036 0 1.875.84 1.875 '
    '1.875v11.25c0 1.035-.84 1.875-1.875 1.875h-9.75A1.875 1.875 0 013 20.625V9.375zm9.586 4.594a'
    '.75.75 0 00-1.172-.938l-2.476 3.096-.908-.907a.75.75 0 00-1.06 1.06l1.5 1.5a.75.75 0 001.116-'
    '.062l3-3.75z" clip-rule="evenodd"></path></svg>'
)
