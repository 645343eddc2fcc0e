"""Terminal output: colours, styles, styled cells, line rendering and interruptable input."""