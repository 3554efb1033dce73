"""Small character, number, text, memory, linked-list and output helpers."""