"""Mouse-steered snake: the head seeks the pointer and the body trails along its path."""
