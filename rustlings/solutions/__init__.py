"""Reference solutions to a selection of the exercises."""